"""Data models for parsed staged changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple


@dataclass(frozen=True)
class ChangedFile:
    """One file section of a diff: its path and its +/- lines, in order."""

    filename: str
    changes: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "changes", tuple(self.changes))

    @property
    def line_count(self) -> int:
        return len(self.changes)

    def to_payload(self) -> dict:
        """Shape sent to the review endpoint."""
        return {"filename": self.filename, "changes": "\n".join(self.changes)}


def total_changed_lines(files: Iterable[ChangedFile]) -> int:
    return sum(f.line_count for f in files)
