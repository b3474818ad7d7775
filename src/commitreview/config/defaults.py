"""Starter .reviewrc.json written by ``commit-review init``."""

from __future__ import annotations

import json

from commitreview.config.schema import (
    DEFAULT_API_ENDPOINT,
    DEFAULT_IGNORE_FILES,
    DEFAULT_MAX_DIFF_LINES,
    DEFAULT_MODEL,
)

CONFIG_FILENAME = ".reviewrc.json"

# No apiKey entry: keys come from REVIEW_API_KEY.
DEFAULT_CONFIG: dict = {
    "apiEndpoint": DEFAULT_API_ENDPOINT,
    "model": DEFAULT_MODEL,
    "maxDiffLines": DEFAULT_MAX_DIFF_LINES,
    "ignoreFiles": list(DEFAULT_IGNORE_FILES),
}

DEFAULT_JSON = json.dumps(DEFAULT_CONFIG, indent=2) + "\n"
