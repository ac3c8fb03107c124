"""
Hex dumps of byte buffers, with coloured byte classes.

    >>> from hexlens import format_hexdump, remove_escapes
    >>> print(remove_escapes(format_hexdump(b"abcd")))
       offset    0 1  2 3  4 5  6 7  8 9  A B  C D  E F    printable data
      0000000:  6162 6364                                 abcd

Colours: grey for zero bytes, green for whitespace, yellow for non printable
ASCII, red for non ASCII and cyan for printable characters.
"""

from .config import BinariesMode, HexdumpOptions
from .core import (
    BLOCK_SIZE,
    ELISION_MARKER,
    HEADER,
    Block,
    ByteCategory,
    ClassifiedByte,
    chunk,
    classify,
    format_hexdump,
    remove_escapes,
    render_hexdump,
    render_hexdump_file,
    render_line,
)
from .display import hexdump_inspect, is_enabled, off, on
from .errors import InvalidInputError

__all__ = [
    "BLOCK_SIZE",
    "BinariesMode",
    "Block",
    "ByteCategory",
    "ClassifiedByte",
    "ELISION_MARKER",
    "HEADER",
    "HexdumpOptions",
    "InvalidInputError",
    "chunk",
    "classify",
    "format_hexdump",
    "hexdump_inspect",
    "is_enabled",
    "off",
    "on",
    "remove_escapes",
    "render_hexdump",
    "render_hexdump_file",
    "render_line",
]
