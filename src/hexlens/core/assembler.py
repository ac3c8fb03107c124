import logging
import os
import stat
from pathlib import Path
from typing import Callable, Optional, Union

from rich.text import Text

from ..console import to_ansi
from ..errors import InvalidInputError
from .chunker import BLOCK_SIZE, Block, ByteSource, chunk
from .line import render_line

HEADER = "   offset    0 1  2 3  4 5  6 7  8 9  A B  C D  E F    printable data"
HEADER_STYLE = "bright_black"
ELISION_MARKER = "  **"
NEWLINE = "\n"

logger = logging.getLogger(__name__)


def check_limit(limit: Optional[int]) -> Optional[int]:
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidInputError(f"limit must be None or a non-negative integer, got {limit!r}")
    if limit < 0:
        raise InvalidInputError(f"limit must not be negative, got {limit}")
    return limit


def tail_length(total: int) -> int:
    """Size of the final block: 1..16 bytes, a full block when total is aligned."""
    return total % BLOCK_SIZE or BLOCK_SIZE


def _as_buffer(data) -> memoryview:
    if isinstance(data, str) or not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidInputError(f"expected a bytes-like object, got {type(data)}")
    return memoryview(data).cast("B")


def _assemble(
    head: ByteSource,
    total: int,
    limit: Optional[int],
    read_tail: Callable[[int], bytes],
) -> Text:
    lines = [Text(HEADER, style=HEADER_STYLE)]

    if limit == 0:
        logger.debug(f"Limit is 0, rendering the header only for {total} bytes")
        return Text(NEWLINE).join(lines)

    lines.extend(render_line(block) for block in chunk(head))

    if limit is not None and total > limit:
        length = tail_length(total)
        tail = Block.from_bytes((total - length) // BLOCK_SIZE, read_tail(length))
        logger.debug(
            f"Truncated {total} bytes to {limit}, tail of {length} bytes rendered at block {tail.index}"
        )
        lines.append(Text(ELISION_MARKER))
        lines.append(render_line(tail))

    return Text(NEWLINE).join(lines)


def render_hexdump(data: Union[bytes, bytearray, memoryview], limit: Optional[int] = None) -> Text:
    """
    Render data as a styled hex dump document.

    When data is longer than limit only the first limit bytes are rendered,
    followed by an elision marker and the final block of data at its real
    offset. limit=None renders everything.
    """
    view = _as_buffer(data)
    limit = check_limit(limit)
    total = len(view)

    head = view if limit is None or total <= limit else view[:limit]
    return _assemble(head, total, limit, lambda n: view[total - n :].tobytes())


def format_hexdump(
    data: Union[bytes, bytearray, memoryview],
    limit: Optional[int] = None,
    color: bool = True,
) -> str:
    """Same as render_hexdump, rendered to a string with ANSI colours."""
    return to_ansi(render_hexdump(data, limit), color=color)


def render_hexdump_file(path: Union[str, os.PathLike], limit: Optional[int] = None) -> Text:
    """
    Render a file as a hex dump without reading it whole.

    Untruncated files are streamed block by block; truncated ones read the
    first limit bytes and seek to the final block. Pipes, FIFOs and devices
    report no usable size, so they are read whole.
    """
    limit = check_limit(limit)
    path = Path(path)
    with path.open("rb") as f:
        st = os.fstat(f.fileno())
        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"{path} is not a regular file, reading it whole")
            return render_hexdump(f.read(), limit)

        total = st.st_size
        logger.debug(f"Rendering {path} ({total} bytes, limit {limit})")

        def read_tail(n: int) -> bytes:
            f.seek(total - n)
            return f.read(n)

        if limit is None or total <= limit:
            return _assemble(f, total, limit, read_tail)
        return _assemble(f.read(limit), total, limit, read_tail)
