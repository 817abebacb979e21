"""Ranker output records."""

from pydantic import BaseModel


class RankedRecommendation(BaseModel):
    """A posting and its heuristic match score.

    ``similarity_score`` is cosine similarity plus additive boosts, so it
    can exceed 1.0.
    """
    job_posting_id: str
    similarity_score: float


class SkippedPosting(BaseModel):
    """A posting left out of a ranking because its embedding was unusable."""
    job_posting_id: str
    reason: str = "DimensionMismatch"
    expected_dim: int = 0
    actual_dim: int = 0
