"""Terminal rendering with Rich."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from commitreview.git.models import ChangedFile


def render_file_summary(console: Console, files: Sequence[ChangedFile]) -> None:
    """List the files that will be sent for review."""
    table = Table(title="Staged changes", title_style="bold", border_style="dim")
    table.add_column("File", style="magenta")
    table.add_column("+", justify="right", style="green")
    table.add_column("-", justify="right", style="red")

    for f in files:
        added = sum(1 for c in f.changes if c.startswith("+"))
        table.add_row(Text(f.filename), str(added), str(f.line_count - added))

    console.print()
    console.print(table)


def render_review(console: Console, feedback: str) -> None:
    console.print()
    console.print(
        Panel(Markdown(feedback), title="🔍 AI code review", title_align="left", border_style="cyan")
    )
