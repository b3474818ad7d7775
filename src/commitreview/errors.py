"""Error kinds shared by every layer. Only the CLI turns them into exit codes."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    CONFIG = "config"
    GIT = "git"
    UNEXPECTED = "unexpected"


class ReviewToolError(Exception):
    """Base error. *kind* tells the caller which failure policy applies."""

    kind: ErrorKind = ErrorKind.UNEXPECTED
    exit_code: int = 2

    def __init__(self, message: str, *, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class ConfigError(ReviewToolError):
    """Raised when the configuration is unusable (e.g. no API key)."""

    kind = ErrorKind.CONFIG


class GitError(ReviewToolError):
    """Raised when git is unavailable or returns an unexpected error."""

    kind = ErrorKind.GIT
