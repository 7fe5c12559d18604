"""
Scoring model — ScoredCandidate, a candidate with its ranking signals.

weighted_score is set once by the combiner and may be scaled once more by the
diversity stage; it is never recomputed from the signals afterwards.
"""

from typing import Optional

from pydantic import BaseModel

from .candidate import Candidate


class ScoredCandidate(BaseModel):
    """A candidate with all its scoring components."""

    candidate: Candidate
    relevance: float
    quality: float
    recency: float
    weighted_score: float

    @property
    def deal_id(self) -> str:
        return self.candidate.deal_id

    @property
    def restaurant_id(self) -> Optional[str]:
        return self.candidate.restaurant_id
