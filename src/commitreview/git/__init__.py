"""Git interface layer: adapter, diff parsing, ignore rules, models."""

from commitreview.errors import GitError
from commitreview.git.adapter import DiffSource, get_repo_root, get_staged_diff
from commitreview.git.diff_parser import DiffParser, collect_changes, parse_diff
from commitreview.git.ignore import IgnoreMode, IgnoreRule, filter_files, is_ignored
from commitreview.git.models import ChangedFile, total_changed_lines

__all__ = [
    "ChangedFile",
    "DiffParser",
    "DiffSource",
    "GitError",
    "IgnoreMode",
    "IgnoreRule",
    "collect_changes",
    "filter_files",
    "get_repo_root",
    "get_staged_diff",
    "is_ignored",
    "parse_diff",
    "total_changed_lines",
]
