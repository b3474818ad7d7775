"""commit-review: AI review of staged changes before they are committed."""

__version__ = "0.1.0"
