"""vcsdiff CLI: Typer application with diff, log, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from vcsdiff import __version__

app = typer.Typer(
    name="vcsdiff",
    help="Rename-aware side-by-side diffs for git and jj, powered by difftastic.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the repository root (git first, then jj), exit 2 on failure."""
    from vcsdiff.vcs.git import GitAdapter
    from vcsdiff.vcs.jj import JjAdapter
    from vcsdiff.vcs.runner import VcsError

    for lookup in (GitAdapter().toplevel, JjAdapter().root):
        try:
            return lookup()
        except VcsError:
            continue
    console.print("[bold red]Error:[/bold red] not inside a git or jj repository")
    raise typer.Exit(code=2)


def _load(root: Path, config: Optional[str]):
    from vcsdiff.config.loader import ConfigError, load_config

    try:
        return load_config(root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _resolve_kind(vcs: Optional[str], configured: str, root: Path):
    from vcsdiff.vcs.models import VcsKind, detect_vcs

    choice = vcs or configured
    if choice == "auto":
        return detect_vcs(root)
    try:
        return VcsKind.parse(choice)
    except ValueError as exc:
        console.print(f"[bold red]Invalid VCS:[/bold red] {choice}")
        raise typer.Exit(code=2) from exc


def _check_format(fmt: Optional[str]) -> None:
    if fmt is not None and fmt not in ("terminal", "json"):
        console.print(f"[bold red]Invalid format:[/bold red] {fmt}")
        raise typer.Exit(code=2)


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    range_: Optional[str] = typer.Argument(None, metavar="RANGE", help="Commit range (git) or revset (jj)"),
    vcs: Optional[str] = typer.Option(None, "--vcs", help="Backend: git | jj (default: auto-detect)"),
    unstaged: bool = typer.Option(False, "--unstaged", help="Diff uncommitted working-tree changes"),
    staged: bool = typer.Option(False, "--staged", help="Diff staged changes (jj: current revision)"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .vcsdiff.toml"),
    jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Worker threads"),
    no_renames: bool = typer.Option(False, "--no-renames", help="Skip the rename-detection query"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging with timing"),
) -> None:
    """Show a rename-aware diff for a range, unstaged, or staged changes."""
    from vcsdiff.diff.facade import DiffError, run_diff, run_diff_staged, run_diff_unstaged
    from vcsdiff.logging_setup import setup_logger
    from vcsdiff.output import json_report, terminal
    from vcsdiff.vcs.models import VcsKind

    setup_logger(debug)

    if unstaged and staged:
        console.print("[bold red]Error:[/bold red] --unstaged and --staged are exclusive")
        raise typer.Exit(code=2)
    if (unstaged or staged) and range_:
        console.print("[bold red]Error:[/bold red] RANGE cannot be combined with --unstaged/--staged")
        raise typer.Exit(code=2)
    _check_format(format)

    repo_root = _resolve_repo_root()
    cfg = _load(repo_root, config)
    kind = _resolve_kind(vcs, cfg.diff.vcs, repo_root)

    if format:
        cfg.output.format = format  # type: ignore[assignment]
    if jobs:
        cfg.diff.jobs = jobs
    if no_renames:
        cfg.diff.rename_detection = False

    try:
        if unstaged:
            result = run_diff_unstaged(kind, cwd=repo_root, config=cfg.diff)
        elif staged:
            result = run_diff_staged(kind, cwd=repo_root, config=cfg.diff)
        else:
            default = "HEAD" if kind is VcsKind.GIT else "@"
            scope = range_ or cfg.diff.default_range or default
            result = run_diff(scope, kind, cwd=repo_root, config=cfg.diff)
    except DiffError as exc:
        console.print(f"[bold red]Diff error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if cfg.output.format == "json":
        print(json_report.render(result))
    else:
        terminal.render(result)


# ── log ───────────────────────────────────────────────────────────────────────


@app.command()
def log(
    vcs: Optional[str] = typer.Option(None, "--vcs", help="Backend: git | jj (default: auto-detect)"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Maximum revisions"),
    revset: Optional[str] = typer.Option(None, "--revset", "-r", help="Revision filter"),
    before: Optional[str] = typer.Option(None, "--before", help="List range starts for this end revision"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .vcsdiff.toml"),
) -> None:
    """List recent revisions to diff."""
    from vcsdiff.logging_setup import setup_logger
    from vcsdiff.output import json_report, terminal
    from vcsdiff.vcs.history import list_range_starts, list_revisions
    from vcsdiff.vcs.runner import VcsError

    setup_logger()
    _check_format(format)
    repo_root = _resolve_repo_root()
    cfg = _load(repo_root, config)
    kind = _resolve_kind(vcs, cfg.diff.vcs, repo_root)
    n = limit or cfg.log.limit
    log_revset = revset or cfg.log.jj_revset or None

    try:
        if before:
            items = list_range_starts(kind, before, limit=n, revset=log_revset, cwd=repo_root)
        else:
            items = list_revisions(kind, limit=n, revset=log_revset, cwd=repo_root)
    except VcsError as exc:
        console.print(f"[bold red]Failed to load {kind.value} history:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if (format or cfg.output.format) == "json":
        print(json_report.render_revisions(items))
    else:
        terminal.render_revisions(items)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .vcsdiff.toml in the repo root."""
    from vcsdiff.config.defaults import DEFAULT_TOML
    from vcsdiff.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"vcsdiff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """vcsdiff: rename-aware side-by-side diffs for git and jj."""

