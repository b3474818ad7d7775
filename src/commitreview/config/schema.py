"""Configuration schema: the immutable settings for one review run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from commitreview.errors import ConfigError

DEFAULT_API_ENDPOINT = "https://api.deepseek.com/chat/completions"
DEFAULT_MODEL = "deepseek-chat"
DEFAULT_MAX_DIFF_LINES = 300
DEFAULT_IGNORE_FILES: Tuple[str, ...] = (".lock", ".json", ".md", ".gitignore")

# Keys accepted in .reviewrc.json, mapped to ReviewConfig field names.
FILE_KEYS: dict[str, str] = {
    "apiKey": "api_key",
    "apiEndpoint": "api_endpoint",
    "ignoreFiles": "ignore_files",
    "maxDiffLines": "max_diff_lines",
    "model": "model",
}


@dataclass(frozen=True)
class ReviewConfig:
    api_key: str
    api_endpoint: str = DEFAULT_API_ENDPOINT
    ignore_files: Tuple[str, ...] = field(default=DEFAULT_IGNORE_FILES)
    max_diff_lines: int = DEFAULT_MAX_DIFF_LINES
    model: str = DEFAULT_MODEL

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigError(
                "An API key is required. Set REVIEW_API_KEY or add \"apiKey\" "
                "to .reviewrc.json."
            )
        # Accept any iterable of strings but store a tuple.
        object.__setattr__(self, "ignore_files", tuple(self.ignore_files))
