"""
Per-candidate blended scoring: relevance, quality, and recency.

Builds a ScoredCandidate for one candidate given its quality signal and the
user context. The blend weights are applied as configured (0.3/0.4/0.2 by
default, summing to 0.9) without renormalization.
"""

from datetime import datetime
from typing import Optional

from ...models.candidate import Candidate
from ...models.config import DEFAULT_CONFIG, RankingConfig
from ...models.context import UserContext
from ...models.scoring import ScoredCandidate
from .recency import recency_score
from .relevance import relevance_score


def combine_scores(
    relevance: float,
    quality: float,
    recency: float,
    config: RankingConfig = DEFAULT_CONFIG,
) -> float:
    """weighted = weight_relevance * relevance + weight_quality * quality + weight_recency * recency."""
    return (
        relevance * config.weight_relevance
        + quality * config.weight_quality
        + recency * config.weight_recency
    )


def build_scored_candidate(
    candidate: Candidate,
    quality: float,
    user_context: UserContext,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> ScoredCandidate:
    """Compute relevance and recency for one candidate and blend with its quality score."""
    rel = relevance_score(candidate, user_context.preferred_cuisine_ids, config)
    rec = recency_score(candidate, config, now)
    return ScoredCandidate(
        candidate=candidate,
        relevance=rel,
        quality=quality,
        recency=rec,
        weighted_score=combine_scores(rel, quality, rec, config),
    )
