"""Review result models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ReviewStatus(str, Enum):
    COMPLETED = "completed"  # feedback shown, user answered
    UNAVAILABLE = "unavailable"  # endpoint answered without usable text, user answered
    TOO_LARGE = "too_large"  # size gate tripped, no request made
    FAILED = "failed"  # transport or HTTP error, fail-open


@dataclass(frozen=True)
class ReviewResult:
    proceed: bool
    status: ReviewStatus
    feedback: Optional[str] = None
    total_lines: int = 0
