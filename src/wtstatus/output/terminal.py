"""Rich terminal reporter — one row per path, coloured by status kind."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from wtstatus.status.models import (
    ConflictedStatus,
    CopiedStatus,
    FileEntry,
    FileStatusKind,
    RenamedStatus,
    WorkingDirectoryStatus,
    is_manual_conflict,
)

_KIND_STYLE = {
    FileStatusKind.NEW: "bold green",
    FileStatusKind.MODIFIED: "bold yellow",
    FileStatusKind.DELETED: "bold red",
    FileStatusKind.RENAMED: "bold blue",
    FileStatusKind.COPIED: "bold blue",
    FileStatusKind.CONFLICTED: "bold white on red",
    FileStatusKind.UNTRACKED: "dim green",
    FileStatusKind.IGNORED: "dim",
}


def _kind_pill(entry: FileEntry) -> Text:
    kind = entry.status.kind
    return Text(f" {kind.value.upper()} ", style=_KIND_STYLE.get(kind, ""))


def _details(entry: FileEntry) -> Text:
    status = entry.status
    if isinstance(status, (RenamedStatus, CopiedStatus)):
        return Text(f"from {status.old_path}")
    if isinstance(status, ConflictedStatus):
        conflict = status.entry
        action = conflict.action.value.replace("_", " ")
        if conflict.conflict_marker_count is None:
            return Text(f"{action} (resolve manually)")
        return Text(f"{action}, {conflict.conflict_marker_count} marker(s)")
    return Text("")


def _branch_line(status: WorkingDirectoryStatus) -> Optional[str]:
    branch = status.branch
    if branch.head is None and branch.oid is None:
        return None
    head = branch.head or f"detached at {(branch.oid or '')[:7]}"
    line = f"On {head}"
    if branch.upstream:
        line += f" tracking {branch.upstream}"
        if branch.ahead is not None and branch.behind is not None:
            line += f" (+{branch.ahead} -{branch.behind})"
    return line


def render(
    status: WorkingDirectoryStatus,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print the working directory status using Rich."""
    console = console or Console()

    branch_line = _branch_line(status)
    if branch_line:
        console.print(Text(branch_line, style="dim"))

    if status.is_clean:
        console.print("[bold green]Working tree clean.[/bold green]")
        return

    table = Table(show_lines=False, border_style="dim")
    table.add_column("Status", justify="center", width=14)
    table.add_column("Path", style="cyan")
    table.add_column("Details")

    for entry in status.files:
        table.add_row(_kind_pill(entry), Text(entry.path), _details(entry))

    console.print(table)

    if show_summary:
        _print_summary(console, status)


def _print_summary(console: Console, status: WorkingDirectoryStatus) -> None:
    conflicted = status.conflicted_files
    manual = [e for e in conflicted if is_manual_conflict(e.status)]
    console.print()
    console.print(f"[dim]Changed paths:[/dim]  {len(status.files)}")
    console.print(f"[dim]Conflicted:[/dim]     {len(conflicted)}")
    console.print(f"[dim]Manual:[/dim]         {len(manual)}")
