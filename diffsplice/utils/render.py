"""
Terminal rendering of a file patch with its change groups annotated.
"""

from __future__ import annotations

from typing import Dict, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core.hunks import parse_hunks
from ..core.models import Hunk

LINE_STYLES = {"+": "green", "-": "red", " ": "dim"}


def _group_starts(hunk: Hunk) -> Dict[int, str]:
    labels = {}
    for n, group in enumerate(hunk.change_groups):
        labels[group.start_index] = f"#{n} -{group.old_start_line} +{group.new_start_line}"
    return labels


def build_hunk_table(hunk: Hunk) -> Table:
    table = Table(show_header=True, expand=False)
    table.add_column("old", justify="right", style="dim")
    table.add_column("new", justify="right", style="dim")
    table.add_column("line", overflow="fold")
    table.add_column("group", style="cyan")

    labels = _group_starts(hunk)
    old_line, new_line = hunk.old_start_line, hunk.start_line
    for i, line in enumerate(hunk.lines[1:], start=1):
        prefix = line[:1]
        old_cell = new_cell = ""
        if prefix == "+":
            new_cell = str(new_line)
            new_line += 1
        elif prefix == "-":
            old_cell = str(old_line)
            old_line += 1
        elif prefix == " ":
            old_cell, new_cell = str(old_line), str(new_line)
            old_line += 1
            new_line += 1
        table.add_row(old_cell, new_cell, Text(line, style=LINE_STYLES.get(prefix, "yellow")), labels.get(i, ""))
    return table


def render_file_diff(patch: str, console: Optional[Console] = None) -> int:
    """Print every hunk of ``patch``; returns the number of hunks rendered."""
    console = console or Console()
    hunks = parse_hunks(patch)
    if not hunks:
        console.print("[yellow]No hunks in patch[/yellow]")
        return 0
    for index, hunk in enumerate(hunks):
        # Text, not markup: headers may contain brackets
        console.print(Text(f"[{index}] {hunk.header}", style="bold cyan"))
        console.print(build_hunk_table(hunk))
    return len(hunks)
