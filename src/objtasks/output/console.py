"""Rich Console factory and theme for objtasks output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Rich drops color codes when not attached to a TTY
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

OBJ_THEME = Theme(
    {
        "obj.ok": "bold green",
        "obj.error": "bold red",
        "obj.op": "bold cyan",
        "obj.key": "dim",
        "obj.selector": "bold magenta",
        "obj.yes": "green",
        "obj.no": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=OBJ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
