from .app import HexViewerApp
from .render import render_hex, render_text

__all__ = [
    "HexViewerApp",
    "render_hex",
    "render_text",
]
