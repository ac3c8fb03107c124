"""
Interactive display of byte buffers as hex dumps.

Python prints interactive results through sys.displayhook. on() swaps in a
hook that dumps bytes-like values and hands everything else to the hook it
replaced; off() puts that hook back.

    >>> import hexlens
    >>> hexlens.on()
    >>> b"\\x00\\x01abc"          # printed as a hex dump
    >>> hexlens.on(binaries="infer")
    >>> b"plain text"            # printable, printed as usual
    >>> hexlens.off()
"""

import builtins
import dataclasses
import logging
import sys
from typing import Optional

from .config import DEFAULT_OPTIONS, BinariesMode, HexdumpOptions
from .core import format_hexdump

logger = logging.getLogger(__name__)

BYTES_TYPES = (bytes, bytearray, memoryview)
# Control characters that still count as printable text.
PRINTABLE_CONTROLS = frozenset("\n\r\t\v\b\f\x1b\x07")

_previous_hook = None
_options = DEFAULT_OPTIONS


def is_printable(data, printable_limit: Optional[int] = None) -> bool:
    """True when data is UTF-8 whose first printable_limit characters are printable."""
    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        return False
    if printable_limit is not None:
        text = text[:printable_limit]
    return all(char.isprintable() or char in PRINTABLE_CONTROLS for char in text)


def should_dump(data, options: HexdumpOptions = DEFAULT_OPTIONS) -> bool:
    if options.binaries is BinariesMode.AS_BINARIES:
        return True
    if options.binaries is BinariesMode.AS_STRINGS:
        return False
    return not is_printable(data, options.printable_limit)


def hexdump_inspect(value, options: Optional[HexdumpOptions] = None) -> str:
    options = options or _options
    if isinstance(value, BYTES_TYPES) and should_dump(value, options):
        return "\n" + format_hexdump(value, options.limit, color=options.color) + "\n"
    return repr(value)


def _displayhook(value):
    if not isinstance(value, BYTES_TYPES):
        _previous_hook(value)
        return
    # Mirror the default hook: reset _ while printing, then store the value.
    builtins._ = None
    sys.stdout.write(hexdump_inspect(value, _options) + "\n")
    builtins._ = value


def on(options: Optional[HexdumpOptions] = None, **overrides) -> None:
    """
    Dump bytes-like values printed by the interactive interpreter.

    Keyword overrides are applied on top of options, e.g.
    on(binaries="infer", limit=256).
    """
    global _previous_hook, _options

    _options = dataclasses.replace(options or DEFAULT_OPTIONS, **overrides)
    if _previous_hook is None:
        _previous_hook = sys.displayhook
        sys.displayhook = _displayhook
        logger.info(f"Hexdump display enabled with {_options}")
    else:
        logger.info(f"Hexdump display options replaced with {_options}")


def off() -> None:
    """Restore the display hook that was active before on()."""
    global _previous_hook, _options

    if _previous_hook is None:
        logger.debug("Hexdump display is not enabled, nothing to restore")
        return
    sys.displayhook = _previous_hook
    _previous_hook = None
    _options = DEFAULT_OPTIONS
    logger.info("Hexdump display disabled")


def is_enabled() -> bool:
    return _previous_hook is not None
