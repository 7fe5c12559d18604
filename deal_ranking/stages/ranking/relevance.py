"""
Personal relevance: cuisine preference match plus distance decay.

relevance = cuisine_score * relevance_cuisine_weight
          + distance_score * relevance_distance_weight

This is a sub-weighted composite and is not normalized to [0, 1].
"""

from typing import AbstractSet, Optional

from ...models.candidate import Candidate
from ...models.config import DEFAULT_CONFIG, RankingConfig
from ...utils.scores import half_life_decay


def cuisine_score(
    cuisine_id: Optional[str],
    preferred_cuisine_ids: AbstractSet[str],
    config: RankingConfig = DEFAULT_CONFIG,
) -> float:
    """Full score for a preferred cuisine, the mismatch score otherwise (including no cuisine)."""
    if cuisine_id and cuisine_id in preferred_cuisine_ids:
        return config.cuisine_match_score
    return config.cuisine_mismatch_score


def distance_score(
    distance_miles: Optional[float],
    config: RankingConfig = DEFAULT_CONFIG,
) -> float:
    """Half-life decay over distance. 0 when the distance is unknown."""
    if distance_miles is None:
        return 0.0
    return half_life_decay(distance_miles, config.distance_half_life_miles)


def relevance_score(
    candidate: Candidate,
    preferred_cuisine_ids: AbstractSet[str],
    config: RankingConfig = DEFAULT_CONFIG,
) -> float:
    return (
        cuisine_score(candidate.cuisine_id, preferred_cuisine_ids, config) * config.relevance_cuisine_weight
        + distance_score(candidate.distance_miles, config) * config.relevance_distance_weight
    )
