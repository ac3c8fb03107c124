import io

from rich.console import Console, RenderableType

# Wide enough that a dump line never gets near the edge; lines are soft
# wrapped anyway.
CONSOLE_WIDTH = 200


def make_console(color: bool = True) -> Console:
    return Console(
        file=io.StringIO(),
        force_terminal=color,
        color_system="standard" if color else None,
        no_color=not color,
        width=CONSOLE_WIDTH,
        highlight=False,
        markup=False,
        emoji=False,
    )


def to_ansi(renderable: RenderableType, color: bool = True) -> str:
    """Render to a string, with ANSI SGR escapes when color is on."""
    console = make_console(color)
    with console.capture() as capture:
        console.print(renderable, end="", soft_wrap=True)
    return capture.get()
