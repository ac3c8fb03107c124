from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, Static

from ..config import DEFAULT_OPTIONS, HexdumpOptions
from ..display import should_dump
from .render import render_hex, render_text


class DumpScreen(Screen):
    BINDINGS = [
        Binding("t", "toggle_view", "Toggle hex/text"),
        Binding("l", "toggle_limit", "Toggle limit"),
        Binding("q", "app.quit", "Quit"),
    ]
    CSS = """
    #data-panel {
        height: 1fr;
    }

    #view-mode-label {
        height: 1;
        padding: 0 1;
        background: $accent;
        color: $text;
    }

    #data-view {
        height: 1fr;
        padding: 0 1;
    }
    """

    def __init__(self, data: bytes, subtitle: str, options: HexdumpOptions = DEFAULT_OPTIONS) -> None:
        super().__init__()
        self._buffer = data
        self._subtitle = subtitle
        self._dump_options = options
        self._hex_mode: bool = should_dump(data, options)
        self._limited: bool = options.limit is not None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="data-panel"):
            yield Label("", id="view-mode-label")
            with VerticalScroll(id="data-view"):
                yield Static(id="data-content")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self._subtitle
        self._update_mode_label()
        self._update_content()

    # ------------------------------------------------------------------

    @property
    def hex_mode(self) -> bool:
        return self._hex_mode

    @property
    def shown_limit(self):
        return self._dump_options.limit if self._limited else None

    def _update_mode_label(self) -> None:
        mode = "HEX" if self._hex_mode else "TEXT"
        limit = "all bytes" if self.shown_limit is None else f"first {self.shown_limit} bytes"
        self.query_one("#view-mode-label", Label).update(
            f" {mode}  {len(self._buffer)} bytes, showing {limit}  (T to toggle)"
        )

    def _update_content(self) -> None:
        render = render_hex if self._hex_mode else render_text
        self.query_one("#data-content", Static).update(render(self._buffer, self.shown_limit))

    # ------------------------------------------------------------------

    def action_toggle_view(self) -> None:
        self._hex_mode = not self._hex_mode
        self._update_mode_label()
        self._update_content()

    def action_toggle_limit(self) -> None:
        if self._dump_options.limit is None:
            return
        self._limited = not self._limited
        self._update_mode_label()
        self._update_content()
