"""Rich Console factory and theme for labeledname output.

Consoles render into a StringIO buffer so every renderer keeps the
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LABELEDNAME_THEME = Theme(
    {
        "ln.ok": "bold green",
        "ln.error": "bold red",
        "ln.warning": "bold yellow",
        "ln.op": "bold cyan",
        "ln.key": "dim",
        "ln.base": "bold",
        "ln.label": "blue",
        "ln.identifier": "bold magenta",
        "ln.quoted": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=LABELEDNAME_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
