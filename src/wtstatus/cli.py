"""wtstatus CLI — Typer application with status, conflicts, and init commands."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler

from wtstatus import __version__

app = typer.Typer(
    name="wtstatus",
    help="Structured working-tree status, including merge conflicts.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _setup_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_repo_root(path: Path) -> Path:
    """Find the git repo root, exit 1 if *path* isn't in one, 2 on git failure."""
    from wtstatus.git.adapter import GitError, find_repo_root

    try:
        repo_root = find_repo_root(path)
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if repo_root is None:
        console.print(f"[bold red]Not a git repository:[/bold red] {escape(str(path))}")
        raise typer.Exit(code=1)
    return repo_root


def _load(repo_root: Path, config: Optional[str], format: Optional[str]):
    from wtstatus.config.loader import ConfigError, load_config
    from wtstatus.config.schema import OUTPUT_FORMATS

    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {escape(format)}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    return cfg


def _collect(repo_root: Path, cfg):
    """Run the status pipeline, mapping every failure to exit code 2."""
    from wtstatus.git.adapter import GitError
    from wtstatus.git.status_parser import StatusDecodeError
    from wtstatus.status.aggregator import ContentReadError, get_status

    try:
        status = get_status(repo_root, cfg)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    except StatusDecodeError as exc:
        console.print(f"[bold red]Status decode error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    except ContentReadError as exc:
        console.print(f"[bold red]Read error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if status is None:
        # the work tree vanished between the probe and the status call
        console.print(f"[bold red]Not a git repository:[/bold red] {escape(str(repo_root))}")
        raise typer.Exit(code=1)
    return status


def _emit(status, cfg, output: Optional[str], verbose: bool) -> None:
    from wtstatus.output import json_report, terminal

    report_text: Optional[str] = None
    if cfg.output.format == "json":
        report_text = json_report.render(status)
        print(report_text)
    else:
        terminal.render(status, show_summary=cfg.output.show_summary, console=Console())

    if output:
        # report files are always JSON
        Path(output).write_text(report_text or json_report.render(status), encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {escape(output)}[/dim]")


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    path: Path = typer.Argument(Path("."), help="Repository (or a directory inside it)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .wtstatus.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Show every changed path in the working tree."""
    _setup_logging(debug)
    repo_root = _resolve_repo_root(path)
    cfg = _load(repo_root, config, format)

    if verbose or debug:
        console.print(f"[dim]Repo root: {escape(str(repo_root))}[/dim]")
        console.print(f"[dim]Untracked files: {cfg.status.untracked_files}[/dim]")

    result = _collect(repo_root, cfg)
    _emit(result, cfg, output, verbose)


# ── conflicts ─────────────────────────────────────────────────────────────────


@app.command()
def conflicts(
    path: Path = typer.Argument(Path("."), help="Repository (or a directory inside it)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .wtstatus.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    fail_on_markers: bool = typer.Option(
        False, "--fail-on-markers", help="Exit 1 if any conflicted file still contains markers"
    ),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Show only conflicted paths and their remaining conflict markers."""
    _setup_logging(debug)
    repo_root = _resolve_repo_root(path)
    cfg = _load(repo_root, config, format)

    result = _collect(repo_root, cfg)
    conflicted = replace(result, files=result.conflicted_files)
    _emit(conflicted, cfg, None, False)

    if fail_on_markers:
        from wtstatus.status.models import ConflictedStatus

        remaining = [
            e for e in conflicted.files
            if isinstance(e.status, ConflictedStatus) and e.status.entry.conflict_marker_count
        ]
        if remaining:
            console.print(
                f"[bold red]{len(remaining)} file(s) still contain conflict markers.[/bold red]"
            )
            raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    path: Path = typer.Argument(Path("."), help="Repository (or a directory inside it)"),
) -> None:
    """Generate a starter .wtstatus.toml in the repo root."""
    from wtstatus.config.defaults import DEFAULT_TOML
    from wtstatus.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root(path)
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(
            f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {escape(str(config_path))}"
        )
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {escape(str(config_path))}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"wtstatus {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """wtstatus — structured working-tree status for git repositories."""
