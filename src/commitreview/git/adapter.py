"""Git subprocess wrapper: repo root and the staged diff."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, List, Optional

from commitreview.errors import GitError

logger = logging.getLogger(__name__)

GitRunner = Callable[[List[str], Path], str]


def _run_git(args: List[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(f"git {' '.join(args)} failed: {stderr or f'exit code {result.returncode}'}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def get_staged_diff(cwd: Path, runner: GitRunner = _run_git) -> str:
    """Return the unified diff of staged changes (--cached)."""
    return runner(["diff", "--cached", "--no-color"], cwd)


class DiffSource:
    """Supplies the staged diff. Failures are reported as ``None``, never raised."""

    def __init__(self, cwd: Optional[Path] = None, runner: Optional[GitRunner] = None) -> None:
        self._cwd = cwd or Path.cwd()
        self._runner = runner or _run_git

    def get_diff(self) -> Optional[str]:
        try:
            return get_staged_diff(self._cwd, self._runner)
        except GitError as exc:
            logger.warning("Failed to read the staged diff: %s", exc)
            return None
