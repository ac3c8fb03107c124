from typing import Optional

from rich.text import Text

from ..config import DEFAULT_LIMIT
from ..core import render_hexdump


def render_hex(data: bytes, limit: Optional[int] = DEFAULT_LIMIT) -> Text:
    return render_hexdump(data, limit)


def render_text(data: bytes, limit: Optional[int] = DEFAULT_LIMIT) -> Text:
    """Decode as UTF-8, replacing undecodable bytes with �."""
    display = data if limit is None else data[:limit]
    content = Text(display.decode("utf-8", errors="replace"))
    if limit is not None and len(data) > limit:
        content.append(
            f"\n\n… {len(data) - limit} more bytes not shown",
            style="dim italic",
        )
    return content
