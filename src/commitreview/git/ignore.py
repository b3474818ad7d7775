"""Ignore-list matching for changed files.

Each entry is compiled into an :class:`IgnoreRule` with an explicit mode:

* ``EXTENSION``: entries that start with ``.`` (``.json``). A file matches
  when its extension equals the entry, or its name ends with it (dotfiles
  such as ``.gitignore`` have no extension of their own).
* ``SUFFIX``: any other entry (``-lock.yaml``). A file matches when its
  name ends with the entry.

Matching is case-sensitive. ``notes.md.bak`` does not match ``.md``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Iterable, List, Optional, Sequence

from commitreview.git.models import ChangedFile


class IgnoreMode(str, Enum):
    EXTENSION = "extension"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class IgnoreRule:
    pattern: str
    mode: IgnoreMode

    @classmethod
    def from_entry(cls, entry: str) -> "IgnoreRule":
        mode = IgnoreMode.EXTENSION if entry.startswith(".") else IgnoreMode.SUFFIX
        return cls(pattern=entry, mode=mode)

    def matches(self, filename: str) -> bool:
        if self.mode is IgnoreMode.EXTENSION:
            if PurePosixPath(filename).suffix == self.pattern:
                return True
        return filename.endswith(self.pattern)


def compile_rules(ignore_list: Iterable[str]) -> List[IgnoreRule]:
    return [IgnoreRule.from_entry(e) for e in ignore_list if e]


def matching_rule(filename: str, rules: Sequence[IgnoreRule]) -> Optional[IgnoreRule]:
    """Return the first rule that ignores *filename*, or None."""
    for rule in rules:
        if rule.matches(filename):
            return rule
    return None


def is_ignored(filename: str, ignore_list: Iterable[str]) -> bool:
    return matching_rule(filename, compile_rules(ignore_list)) is not None


def filter_files(files: Iterable[ChangedFile], ignore_list: Iterable[str]) -> List[ChangedFile]:
    """Return the files not matched by any ignore entry, in input order."""
    rules = compile_rules(ignore_list)
    return [f for f in files if matching_rule(f.filename, rules) is None]
