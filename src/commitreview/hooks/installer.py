"""Manage the ``pre-commit`` hook that runs commit-review before each commit.

The hooks directory is asked from git (``rev-parse --git-path hooks``), so a
configured ``core.hooksPath`` and linked worktrees are honoured. git starts hooks
with stdin detached from the terminal; the installed script reattaches
``/dev/tty`` when one can be opened so the yes/no prompts still get an answer.
"""

from __future__ import annotations

import logging
import stat
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from commitreview.errors import GitError
from commitreview.git.adapter import GitRunner, _run_git

logger = logging.getLogger(__name__)

HOOK_NAME = "pre-commit"
_HOOK_MARKER = "# commit-review-hook"
_HOOK_SCRIPT = f"""\
#!/bin/sh
{_HOOK_MARKER}
# AI review of the staged changes. Remove with: commit-review uninstall

if [ -t 1 ] && (exec </dev/tty) 2>/dev/null; then
    exec commit-review </dev/tty
fi
exec commit-review
"""


class HookState(str, Enum):
    MISSING = "missing"
    OURS = "ours"
    FOREIGN = "foreign"


def hooks_dir(repo_root: Path, runner: Optional[GitRunner] = None) -> Path:
    """Directory git runs hooks from. Raises GitError outside a repository."""
    out = (runner or _run_git)(["rev-parse", "--git-path", "hooks"], repo_root).strip()
    path = Path(out)
    # relative core.hooksPath values are relative to the worktree root
    return path if path.is_absolute() else repo_root / path


def hook_state(hook_path: Path) -> HookState:
    if not hook_path.exists():
        return HookState.MISSING
    content = hook_path.read_text(encoding="utf-8", errors="replace")
    return HookState.OURS if _HOOK_MARKER in content else HookState.FOREIGN


def _make_executable(path: Path) -> None:
    try:
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError:
        logger.debug("Could not mark %s executable", path, exc_info=True)


def install_hook(
    repo_root: Path, *, force: bool = False, runner: Optional[GitRunner] = None
) -> Tuple[bool, str]:
    """Write the commit-review ``pre-commit`` hook.

    A hook written by another tool is only replaced with ``force``.
    Returns (success, message).
    """
    try:
        hook_path = hooks_dir(repo_root, runner) / HOOK_NAME
    except GitError as exc:
        logger.debug("Hooks directory lookup failed: %s", exc)
        return False, f"Not a git repository: {repo_root}"

    state = hook_state(hook_path)
    if state is HookState.OURS:
        return True, f"commit-review hook is already installed at {hook_path}."
    if state is HookState.FOREIGN and not force:
        return (
            False,
            f"A {HOOK_NAME} hook already exists at {hook_path}. "
            "Use --force to replace it, or call 'commit-review' from it yourself.",
        )

    hook_path.parent.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(_HOOK_SCRIPT, encoding="utf-8")
    _make_executable(hook_path)
    logger.debug("Wrote %s (previous state: %s)", hook_path, state.value)
    return True, f"Installed commit-review {HOOK_NAME} hook at {hook_path}"


def uninstall_hook(repo_root: Path, *, runner: Optional[GitRunner] = None) -> Tuple[bool, str]:
    """Delete the hook if commit-review wrote it. Returns (success, message)."""
    try:
        hook_path = hooks_dir(repo_root, runner) / HOOK_NAME
    except GitError as exc:
        logger.debug("Hooks directory lookup failed: %s", exc)
        return False, f"Not a git repository: {repo_root}"

    state = hook_state(hook_path)
    if state is HookState.MISSING:
        return True, f"No {HOOK_NAME} hook at {hook_path}, nothing to remove."
    if state is HookState.FOREIGN:
        return False, f"The {HOOK_NAME} hook at {hook_path} was not installed by commit-review."

    hook_path.unlink()
    return True, f"Removed commit-review {HOOK_NAME} hook from {hook_path}"
