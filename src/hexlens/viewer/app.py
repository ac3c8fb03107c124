from textual.app import App

from ..config import DEFAULT_OPTIONS, HexdumpOptions
from .dump_screen import DumpScreen


class HexViewerApp(App):
    TITLE = "hexlens"

    def __init__(self, data: bytes, subtitle: str = "", options: HexdumpOptions = DEFAULT_OPTIONS) -> None:
        super().__init__()
        self._buffer = data
        self._subtitle = subtitle
        self._dump_options = options

    def on_mount(self) -> None:
        self.push_screen(DumpScreen(self._buffer, self._subtitle, self._dump_options))
