"""Shared test fixtures: sample diffs, configs, fakes, temp git repos."""

from __future__ import annotations

import contextlib
import io
import subprocess
import textwrap
from pathlib import Path
from typing import List, Optional

import pytest
from rich.console import Console

from commitreview.config.schema import ReviewConfig
from commitreview.review.models import ReviewResult, ReviewStatus


@pytest.fixture
def sample_diff_basic() -> str:
    """The minimal two-file diff: one reviewable file, one ignored JSON file."""
    return (
        "diff --git a/test.js b/test.js\n"
        "+new\n"
        "-old\n"
        "diff --git a/ignore.json b/ignore.json\n"
        "+x\n"
    )


@pytest.fixture
def sample_diff_git() -> str:
    """A diff as git actually prints it, with index lines, file headers and hunks."""
    return textwrap.dedent("""\
        diff --git a/src/app.py b/src/app.py
        index 1234567..abcdef0 100644
        --- a/src/app.py
        +++ b/src/app.py
        @@ -1,4 +1,5 @@
         import os
        -DEBUG = True
        +DEBUG = False
        +TIMEOUT = 30
         
         def main():
        @@ -20,3 +21,3 @@ def main():
        ---- a/legacy marker
        +--- b/new marker
        diff --git a/package-lock.json b/package-lock.json
        index 1111111..2222222 100644
        --- a/package-lock.json
        +++ b/package-lock.json
        @@ -1 +1 @@
        -{"lockfileVersion": 2}
        +{"lockfileVersion": 3}
        diff --git a/docs/new.rst b/docs/new.rst
        new file mode 100644
        index 0000000..e69de29
        --- /dev/null
        +++ b/docs/new.rst
        @@ -0,0 +1,2 @@
        +Title
        +=====
    """)


@pytest.fixture
def sample_diff_mode_only() -> str:
    """A diff with only a file mode change: no +/- lines."""
    return textwrap.dedent("""\
        diff --git a/script.sh b/script.sh
        old mode 100644
        new mode 100755
    """)


@pytest.fixture
def config() -> ReviewConfig:
    return ReviewConfig(
        api_key="test-api-key",
        api_endpoint="https://review.example.test/chat/completions",
    )


@pytest.fixture
def console() -> Console:
    """A console that writes into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)


class FakePrompter:
    """Answers questions from a fixed script and records what was asked."""

    def __init__(self, *answers: bool) -> None:
        self._answers: List[bool] = list(answers)
        self.questions: List[str] = []

    async def ask(self, question: str) -> bool:
        self.questions.append(question)
        return self._answers.pop(0)


class FakeDiffSource:
    def __init__(self, diff: Optional[str]) -> None:
        self._diff = diff
        self.calls = 0

    def get_diff(self) -> Optional[str]:
        self.calls += 1
        return self._diff


class FakeReviewer:
    def __init__(self, proceed: bool = True, status: ReviewStatus = ReviewStatus.COMPLETED) -> None:
        self._result = ReviewResult(proceed=proceed, status=status)
        self.reviewed: List[list] = []

    async def review(self, files):
        self.reviewed.append(list(files))
        return self._result


@pytest.fixture
def fake_prompter():
    return FakePrompter


@pytest.fixture
def fake_diff_source():
    return FakeDiffSource


@pytest.fixture
def fake_reviewer():
    return FakeReviewer


def _scripted_input(text: str):
    """Input opener that serves *text* and closes the stream afterwards."""
    stream = io.StringIO(text)

    @contextlib.contextmanager
    def opener():
        try:
            yield stream
        finally:
            stream.close()

    opener.stream = stream  # type: ignore[attr-defined]
    return opener


@pytest.fixture
def scripted_input():
    return _scripted_input


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
