"""Review run orchestration."""

from commitreview.pipeline.engine import RunOutcome, run_pipeline

__all__ = ["RunOutcome", "run_pipeline"]
