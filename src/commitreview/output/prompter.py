"""Yes/no questions on the terminal.

Git runs hooks with stdin detached from the terminal, so questions are read
from the controlling terminal (``/dev/tty``) when there is one.
"""

from __future__ import annotations

import asyncio
import contextlib
import sys
from typing import Callable, ContextManager, Optional, Protocol, TextIO

from rich.console import Console

InputOpener = Callable[[], ContextManager[TextIO]]


class Prompter(Protocol):
    async def ask(self, question: str) -> bool: ...


def open_terminal_input() -> ContextManager[TextIO]:
    """Open the controlling terminal, falling back to stdin (left open on exit)."""
    try:
        return open("/dev/tty", "r", encoding="utf-8", errors="replace")
    except OSError:
        return contextlib.nullcontext(sys.stdin)


class TerminalPrompter:
    """Ask a question, read one line, map it to a boolean.

    The input handle is opened per question and always closed afterwards.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        open_input: Optional[InputOpener] = None,
    ) -> None:
        self._console = console or Console(stderr=True)
        self._open_input = open_input or open_terminal_input

    async def ask(self, question: str) -> bool:
        with self._open_input() as stream:
            self._console.print(question, end="", markup=False, highlight=False)
            answer = await asyncio.to_thread(stream.readline)
        return answer.strip().lower() == "y"
