"""Rich terminal reporter: a file summary table and revision lists."""

from __future__ import annotations


from rich.console import Console
from rich.table import Table
from rich.text import Text

from vcsdiff.diff.facade import DiffResult
from vcsdiff.difftastic.models import ChangeStatus
from vcsdiff.vcs.models import RevisionItem

_STATUS_STYLE = {
    ChangeStatus.CREATED: "bold green",
    ChangeStatus.DELETED: "bold red",
    ChangeStatus.MODIFIED: "bold yellow",
    ChangeStatus.UNCHANGED: "dim",
}

_STATUS_LABEL = {
    ChangeStatus.CREATED: "A",
    ChangeStatus.DELETED: "D",
    ChangeStatus.MODIFIED: "M",
    ChangeStatus.UNCHANGED: "-",
}


def _status_cell(status: ChangeStatus, moved: bool) -> Text:
    label = "R" if moved else _STATUS_LABEL.get(status, "?")
    style = "bold cyan" if moved else _STATUS_STYLE.get(status, "")
    return Text(f" {label} ", style=style)


def render(result: DiffResult, *, console: Console | None = None) -> None:
    """Print a summary of changed files."""
    console = console or Console()

    if not result.files:
        console.print("[dim]No changes.[/dim]")
        return

    table = Table(show_lines=False, border_style="dim", title_style="bold")
    table.add_column("", justify="center", width=3)
    table.add_column("File", style="magenta")
    table.add_column("From", style="cyan")
    table.add_column("+", justify="right", style="green")
    table.add_column("-", justify="right", style="red")

    total_add = total_del = 0
    for f in result.files:
        total_add += f.additions
        total_del += f.deletions
        table.add_row(
            _status_cell(f.status, f.moved_from is not None),
            f.path,
            f.moved_from or "",
            str(f.additions),
            str(f.deletions),
        )

    console.print(table)
    console.print(
        f"[dim]{len(result.files)} file(s),[/dim] "
        f"[green]+{total_add}[/green] [red]-{total_del}[/red]"
    )


def render_revisions(items: list[RevisionItem], *, console: Console | None = None) -> None:
    console = console or Console()
    if not items:
        console.print("[dim]No revisions found.[/dim]")
        return
    for item in items:
        console.print(Text(item.text), highlight=False)
