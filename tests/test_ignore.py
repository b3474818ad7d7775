"""Tests for ignore-list matching modes."""

import pytest

from commitreview.config.schema import DEFAULT_IGNORE_FILES
from commitreview.git.ignore import (
    IgnoreMode,
    IgnoreRule,
    compile_rules,
    filter_files,
    is_ignored,
    matching_rule,
)
from commitreview.git.models import ChangedFile


class TestRuleModes:
    def test_dot_entry_is_extension(self):
        assert IgnoreRule.from_entry(".json").mode is IgnoreMode.EXTENSION

    def test_plain_entry_is_suffix(self):
        assert IgnoreRule.from_entry("-lock.yaml").mode is IgnoreMode.SUFFIX

    def test_empty_entries_dropped(self):
        assert compile_rules(["", ".md"]) == [IgnoreRule(".md", IgnoreMode.EXTENSION)]


class TestDefaultList:
    @pytest.mark.parametrize("path", [
        "package.json",
        "config/settings.json",
        "yarn.lock",
        "poetry.lock",
        "README.md",
        "docs/guide.md",
        ".gitignore",
        "sub/dir/.gitignore",
    ])
    def test_ignored(self, path):
        assert is_ignored(path, DEFAULT_IGNORE_FILES)

    @pytest.mark.parametrize("path", [
        "test.js",
        "src/app.py",
        "notes.md.bak",
        "README.MD",  # case-sensitive
        "data.jsonl",
        "lockfile.py",
    ])
    def test_kept(self, path):
        assert not is_ignored(path, DEFAULT_IGNORE_FILES)


class TestSuffixMode:
    def test_free_suffix(self):
        assert is_ignored("pnpm-lock.yaml", ["-lock.yaml"])
        assert not is_ignored("pnpm.yaml", ["-lock.yaml"])

    def test_compound_dot_entry_matches_by_suffix(self):
        # .d.ts is not a single extension but still ends the filename.
        assert is_ignored("types/index.d.ts", [".d.ts"])
        assert not is_ignored("types/index.ts", [".d.ts"])

    def test_matching_rule_reports_mode(self):
        rules = compile_rules(["-lock.yaml", ".json"])
        rule = matching_rule("a/package.json", rules)
        assert rule is not None
        assert rule.mode is IgnoreMode.EXTENSION
        assert matching_rule("a/main.py", rules) is None


class TestFilterFiles:
    def _files(self):
        return [
            ChangedFile("src/app.py", ("+x",)),
            ChangedFile("package.json", ("+y",)),
            ChangedFile("empty.py", ()),
            ChangedFile("CHANGELOG.md", ("+z",)),
        ]

    def test_keeps_order_and_empty_files(self):
        kept = filter_files(self._files(), DEFAULT_IGNORE_FILES)
        assert [f.filename for f in kept] == ["src/app.py", "empty.py"]

    def test_idempotent(self):
        once = filter_files(self._files(), DEFAULT_IGNORE_FILES)
        twice = filter_files(once, DEFAULT_IGNORE_FILES)
        assert once == twice

    def test_order_independent(self):
        a = filter_files(self._files(), [".md", ".json"])
        b = filter_files(self._files(), [".json", ".md"])
        assert a == b

    def test_empty_ignore_list_keeps_everything(self):
        assert filter_files(self._files(), []) == self._files()
