"""Run pipeline: fetch diff, filter, ask, review, decide.

Every path ends in a :class:`RunOutcome`. The pipeline never exits the
process; the CLI maps the outcome to an exit code.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Protocol, Sequence

from rich.console import Console

from commitreview.config.schema import ReviewConfig
from commitreview.git.diff_parser import parse_diff
from commitreview.git.ignore import filter_files
from commitreview.git.models import ChangedFile
from commitreview.output.prompter import Prompter
from commitreview.output.terminal import render_file_summary
from commitreview.review.models import ReviewResult

logger = logging.getLogger(__name__)

REVIEW_QUESTION = "\nRun AI code review? (y/N) "


class RunOutcome(str, Enum):
    NO_CHANGES = "no_changes"
    NO_FILES = "no_files"
    SKIPPED = "skipped"
    PROCEED = "proceed"
    ABORT = "abort"

    @property
    def exit_code(self) -> int:
        return 1 if self is RunOutcome.ABORT else 0


class DiffProvider(Protocol):
    def get_diff(self) -> Optional[str]: ...


class Reviewer(Protocol):
    async def review(self, files: Sequence[ChangedFile]) -> ReviewResult: ...


async def run_pipeline(
    config: ReviewConfig,
    diff_source: DiffProvider,
    prompter: Prompter,
    reviewer: Reviewer,
    console: Optional[Console] = None,
) -> RunOutcome:
    """Execute one review run and return how it ended."""
    console = console or Console(stderr=True)

    diff_text = diff_source.get_diff()
    if not diff_text or not diff_text.strip():
        console.print("[green]✓[/green] No staged changes detected.")
        return RunOutcome.NO_CHANGES

    parsed = parse_diff(diff_text)
    files = filter_files(parsed, config.ignore_files)
    logger.debug("Parsed %d file(s), %d left after ignore rules", len(parsed), len(files))
    if not files:
        console.print("[green]✓[/green] No files to review after applying the ignore list.")
        return RunOutcome.NO_FILES

    render_file_summary(console, files)

    if not await prompter.ask(REVIEW_QUESTION):
        console.print("\n[yellow]⚠[/yellow]  Skipping code review, continuing with the commit.\n")
        return RunOutcome.SKIPPED

    result = await reviewer.review(files)
    logger.debug("Review finished: status=%s proceed=%s", result.status.value, result.proceed)
    if not result.proceed:
        console.print("\n[bold red]✗ Commit aborted.[/bold red]\n")
        return RunOutcome.ABORT

    return RunOutcome.PROCEED
