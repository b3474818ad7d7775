"""commit-review CLI: Typer application.

Running ``commit-review`` with no arguments reviews the staged changes;
``install``, ``uninstall`` and ``init`` manage the hook and the config file.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from commitreview import __version__
from commitreview.output.prompter import open_terminal_input

app = typer.Typer(
    name="commit-review",
    help="AI code review for staged changes before they are committed.",
    add_completion=False,
)

console = Console(stderr=True)
logger = logging.getLogger("commitreview")

LOG_LEVEL_ENV = "REVIEW_LOG_LEVEL"


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    if not logger.handlers:
        handler = RichHandler(console=console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from commitreview.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=exc.exit_code) from exc


# ── review (default) ──────────────────────────────────────────────────────────


def _run_review() -> None:
    """Review staged changes and exit with the outcome's code."""
    from commitreview.config.loader import load_config
    from commitreview.errors import ConfigError
    from commitreview.git.adapter import DiffSource
    from commitreview.output.prompter import TerminalPrompter
    from commitreview.pipeline.engine import run_pipeline
    from commitreview.review.client import ReviewClient

    try:
        cfg = load_config()
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=exc.exit_code) from exc

    prompter = TerminalPrompter(console, open_input=open_terminal_input)
    reviewer = ReviewClient(cfg, prompter, console=console)

    try:
        outcome = asyncio.run(run_pipeline(cfg, DiffSource(), prompter, reviewer, console))
    except Exception as exc:
        logger.debug("Review run failed", exc_info=True)
        console.print(f"[bold red]✗ Review run failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    raise typer.Exit(code=outcome.exit_code)


# ── install ───────────────────────────────────────────────────────────────────


@app.command()
def install(
    force: bool = typer.Option(False, "--force", help="Overwrite existing pre-commit hook"),
) -> None:
    """Install commit-review as a git pre-commit hook."""
    from commitreview.hooks.installer import install_hook

    repo_root = _resolve_repo_root()
    success, msg = install_hook(repo_root, force=force)
    if success:
        console.print(f"[green]✓[/green] {msg}")
    else:
        console.print(f"[red]✗[/red] {msg}")
        raise typer.Exit(code=1)


# ── uninstall ─────────────────────────────────────────────────────────────────


@app.command()
def uninstall() -> None:
    """Remove the commit-review pre-commit hook."""
    from commitreview.hooks.installer import uninstall_hook

    repo_root = _resolve_repo_root()
    success, msg = uninstall_hook(repo_root)
    if success:
        console.print(f"[green]✓[/green] {msg}")
    else:
        console.print(f"[red]✗[/red] {msg}")
        raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .reviewrc.json in the current directory."""
    from commitreview.config.defaults import CONFIG_FILENAME, DEFAULT_JSON

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_JSON, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")
    console.print("[dim]Set REVIEW_API_KEY in your environment to enable reviews.[/dim]")


# ── version / default ─────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"commit-review {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Review staged changes with an AI model before committing."""
    _configure_logging()
    if ctx.invoked_subcommand is None:
        _run_review()
