"""Split unified diff text into per-file change records.

Every line starting with ``+`` or ``-`` is kept verbatim, including the
``---``/``+++`` file headers git writes before the first hunk. Hunk headers,
context lines, index and mode lines are dropped.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from commitreview.git.ignore import filter_files
from commitreview.git.models import ChangedFile

_DIFF_HEADER = "diff --git"
_DIFF_HEADER_RE = re.compile(r"^diff --git a/(.*) b/(.*)$")


def _filename_from_header(line: str) -> str:
    """Return the ``b/`` path of a ``diff --git`` header."""
    m = _DIFF_HEADER_RE.match(line.rstrip("\r"))
    if m:
        return m.group(2)
    # Quoted or unusual paths: fall back to the text after the first " b/".
    _, sep, rest = line.partition(" b/")
    return rest.rstrip("\r") if sep else line[len(_DIFF_HEADER):].strip()


class DiffParser:
    """Parse unified diff text into ChangedFile records.

    Usage::

        files = DiffParser(diff_text).parse()
    """

    def __init__(self, diff_text: str) -> None:
        self._lines = diff_text.split("\n")

    def parse(self) -> List[ChangedFile]:
        files: List[ChangedFile] = []
        current_name: Optional[str] = None
        changes: List[str] = []

        for line in self._lines:
            if line.startswith(_DIFF_HEADER):
                if current_name is not None:
                    files.append(ChangedFile(current_name, tuple(changes)))
                current_name = _filename_from_header(line)
                changes = []
                continue

            if current_name is None:
                continue

            if line.startswith("+") or line.startswith("-"):
                changes.append(line)

        if current_name is not None:
            files.append(ChangedFile(current_name, tuple(changes)))

        return files


def parse_diff(diff_text: str) -> List[ChangedFile]:
    return DiffParser(diff_text).parse()


def collect_changes(diff_text: str, ignore_list: Iterable[str]) -> List[ChangedFile]:
    """Parse *diff_text* and drop files matched by *ignore_list*."""
    return filter_files(parse_diff(diff_text), ignore_list)
