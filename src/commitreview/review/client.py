"""AI review client: one chat-completions request per run.

The request is never retried. Oversized diffs skip the request, transport and
HTTP errors let the commit through, and an empty or malformed answer leaves
the decision to the user.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

import httpx
from rich.console import Console
from rich.markup import escape

from commitreview.config.schema import ReviewConfig
from commitreview.git.models import ChangedFile, total_changed_lines
from commitreview.output.prompter import Prompter
from commitreview.output.terminal import render_review
from commitreview.review.models import ReviewResult, ReviewStatus

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a code review assistant. Act as a code reviewer: check the code "
    "changes provided below and give suggestions for improvement."
)

PROCEED_QUESTION = "\nProceed with the commit? (y/N) "
PROCEED_ANYWAY_QUESTION = "\nProceed with the commit anyway? (y/N) "


def build_payload(files: Sequence[ChangedFile], model: str) -> dict:
    """Build the chat-completions request body."""
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": json.dumps([f.to_payload() for f in files], ensure_ascii=False),
            },
        ],
        "stream": False,
    }


def extract_content(data: Any) -> Optional[str]:
    """Return ``choices[0].message.content``, or None when the shape is unexpected."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(content, str) or not content.strip():
        return None
    return content


class ReviewClient:
    """Sends filtered changes to the review endpoint and asks the user what to do."""

    def __init__(
        self,
        config: ReviewConfig,
        prompter: Prompter,
        *,
        console: Optional[Console] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._prompter = prompter
        self._console = console or Console(stderr=True)
        self._transport = transport

    async def review(self, files: Sequence[ChangedFile]) -> ReviewResult:
        total = total_changed_lines(files)
        if total > self._config.max_diff_lines:
            self._console.print(
                f"[yellow]⚠[/yellow]  {total} changed lines exceed the limit of "
                f"{self._config.max_diff_lines}, skipping AI review."
            )
            return ReviewResult(proceed=True, status=ReviewStatus.TOO_LARGE, total_lines=total)

        try:
            with self._console.status("Running AI code review..."):
                feedback = await self._request(files)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("Review request to %s failed", self._config.api_endpoint, exc_info=True)
            self._console.print(f"[bold red]✗ AI code review failed:[/bold red] {escape(str(exc))}")
            return ReviewResult(proceed=True, status=ReviewStatus.FAILED, total_lines=total)

        if feedback is None:
            self._console.print(
                "[yellow]⚠[/yellow]  The review service is busy, no AI review result is available."
            )
            proceed = await self._prompter.ask(PROCEED_ANYWAY_QUESTION)
            return ReviewResult(proceed=proceed, status=ReviewStatus.UNAVAILABLE, total_lines=total)

        render_review(self._console, feedback)
        proceed = await self._prompter.ask(PROCEED_QUESTION)
        return ReviewResult(
            proceed=proceed,
            status=ReviewStatus.COMPLETED,
            feedback=feedback,
            total_lines=total,
        )

    async def _request(self, files: Sequence[ChangedFile]) -> Optional[str]:
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        payload = build_payload(files, self._config.model)

        # No timeout: a slow completion is waited for.
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            r = await client.post(self._config.api_endpoint, json=payload, headers=headers)
            r.raise_for_status()
            try:
                data = r.json()
            except ValueError:
                logger.warning("Review endpoint returned a non-JSON body")
                return None

        logger.debug("Review response received (%d bytes)", len(r.content))
        return extract_content(data)
