"""Remote AI review."""

from commitreview.review.client import ReviewClient, build_payload, extract_content
from commitreview.review.models import ReviewResult, ReviewStatus

__all__ = [
    "ReviewClient",
    "ReviewResult",
    "ReviewStatus",
    "build_payload",
    "extract_content",
]
