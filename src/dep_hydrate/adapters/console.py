from rich.console import Console
from rich.text import Text

# Renders styled text to ANSI strings regardless of where the real output goes
_render_console = Console(force_terminal=True, color_system="standard", highlight=False, soft_wrap=True)


def to_ansi(text: Text) -> str:
    with _render_console.capture() as capture:
        _render_console.print(text, end="")
    return capture.get()


def indent(text: str, prefix: str = "  ") -> Text:
    return Text("\n".join(prefix + line for line in text.rstrip().splitlines()), style="dim")
