"""
Recency: half-life decay over deal age in hours (48 hour half-life by default).
"""

from datetime import datetime
from typing import Optional

from ...models.candidate import Candidate
from ...models.config import DEFAULT_CONFIG, RankingConfig
from ...utils.scores import half_life_decay, hours_since


def recency_score(
    candidate: Candidate,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> float:
    """1.0 for a deal created now, 0.5 after one half-life, 0 when created_at is missing."""
    age_hours = hours_since(candidate.created_at, now)
    if age_hours is None:
        return 0.0
    return half_life_decay(age_hours, config.recency_half_life_hours)
