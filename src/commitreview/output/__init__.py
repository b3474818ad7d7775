"""Terminal output and prompting."""

from commitreview.output.prompter import Prompter, TerminalPrompter, open_terminal_input
from commitreview.output.terminal import render_file_summary, render_review

__all__ = [
    "Prompter",
    "TerminalPrompter",
    "open_terminal_input",
    "render_file_summary",
    "render_review",
]
