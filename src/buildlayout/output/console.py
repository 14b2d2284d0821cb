"""Rich Console factory and theme.

Consoles render into a StringIO buffer so renderers can return strings.
Outside a terminal (tests, pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BUILD_THEME = Theme(
    {
        "bl.ok": "bold green",
        "bl.error": "bold red",
        "bl.warning": "bold yellow",
        "bl.op": "bold cyan",
        "bl.key": "dim",
        "bl.path": "blue",
        "bl.url": "underline",
        "bl.project": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=BUILD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
