"""
Main ranking orchestration: per-candidate scoring, sort, restaurant diversity.

Scoring fans out per candidate (asyncio.gather on the async path) and is
joined before sorting. Sorting and diversity run sequentially over the fully
materialized list.
"""

import asyncio
import logging
from datetime import datetime
from typing import List, Optional

from ...models.candidate import Candidate
from ...models.config import DEFAULT_CONFIG, RankingConfig
from ...models.context import UserContext
from ...models.scoring import ScoredCandidate
from ...signals.quality import QualitySignalProvider
from .blended_scoring import build_scored_candidate
from .restaurant_diversity import apply_restaurant_diversity

logger = logging.getLogger(__name__)


def score_candidates(
    candidates: List[Candidate],
    user_context: UserContext,
    quality_provider: QualitySignalProvider,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[ScoredCandidate]:
    """Score every candidate; output order matches input order."""
    return [
        build_scored_candidate(c, quality_provider.score(c), user_context, config, now)
        for c in candidates
    ]


async def score_candidates_async(
    candidates: List[Candidate],
    user_context: UserContext,
    quality_provider: QualitySignalProvider,
    config: RankingConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> List[ScoredCandidate]:
    """Concurrent scoring: one task per candidate, gathered in input order."""

    async def _score_one(candidate: Candidate) -> ScoredCandidate:
        quality = await quality_provider.score_async(candidate)
        return build_scored_candidate(candidate, quality, user_context, config, now)

    return list(await asyncio.gather(*(_score_one(c) for c in candidates)))


def sort_by_score(
    scored: List[ScoredCandidate],
    tie_break_by_deal_id: bool = False,
) -> List[ScoredCandidate]:
    """
    Stable sort by weighted_score, descending.
    Ties keep retrieval order unless tie_break_by_deal_id is set.
    """
    if tie_break_by_deal_id:
        return sorted(scored, key=lambda s: (-s.weighted_score, s.deal_id))
    return sorted(scored, key=lambda s: s.weighted_score, reverse=True)


def rank_scored(
    scored: List[ScoredCandidate],
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[ScoredCandidate]:
    """Sort, then apply restaurant diversity (re-sorting only when configured)."""
    ranked = sort_by_score(scored, config.tie_break_by_deal_id)
    ranked = apply_restaurant_diversity(ranked, config.diversity_penalty)
    if config.diversity_resort:
        ranked = sort_by_score(ranked, config.tie_break_by_deal_id)
    if ranked:
        logger.debug(
            "[ranking] ranked=%d top=%s score=%.4f",
            len(ranked), ranked[0].deal_id, ranked[0].weighted_score,
        )
    return ranked
