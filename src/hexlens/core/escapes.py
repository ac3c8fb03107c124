import re

# ESC, a Fe byte (or its 8-bit C1 form), parameter bytes, intermediate bytes, final byte.
ESCAPE_SEQUENCE = re.compile(r"\x1B(?:[@-_]|[\x80-\x9F])[0-?]*[ -/]*[@-~]")


def remove_escapes(text: str) -> str:
    """Drop terminal escape sequences, leaving the plain layout untouched."""
    return ESCAPE_SEQUENCE.sub("", text)
