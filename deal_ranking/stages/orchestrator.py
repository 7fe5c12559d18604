"""
Pipeline orchestrator — retrieval, gate, scoring, ranking, diversity, spice,
assembly, run linearly for a single request.

Main entry points are create_feed (sync) and create_feed_async, which fans out
per-candidate scoring. rank_candidates runs every stage after retrieval on
rows the caller already has.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

from ..models.config import RankingConfig, resolve_config
from ..models.context import UserContext
from ..models.feed import FeedEntry
from ..models.scoring import ScoredCandidate
from ..signals.quality import IdBucketQualityProvider, QualitySignalProvider
from ..utils.scores import utc_now
from .assemble import assemble_feed
from .gate import gate_candidates
from .ranking import rank_scored, score_candidates, score_candidates_async
from .ranking.spice import SpicePolicy, TailToWindowSpice
from .retrieval import CandidateRetriever, retrieve_candidates, retrieve_candidates_async

logger = logging.getLogger(__name__)


def _resolve_quality(
    quality_provider: Optional[QualitySignalProvider],
    config: RankingConfig,
) -> QualitySignalProvider:
    if quality_provider is not None:
        return quality_provider
    return IdBucketQualityProvider(config.quality_buckets)


def _resolve_spice(spice: Optional[SpicePolicy], config: RankingConfig) -> SpicePolicy:
    if spice is not None:
        return spice
    return TailToWindowSpice(config.spice_min_length, config.spice_insert_index)


def _finish(
    scored: List[ScoredCandidate],
    config: RankingConfig,
    spice: Optional[SpicePolicy],
) -> List[FeedEntry]:
    """Stages 5-8: sort, diversity, spice, assembly."""
    ranked = rank_scored(scored, config)
    ranked = _resolve_spice(spice, config)(ranked)
    return assemble_feed(ranked)


def rank_candidates(
    rows: List[Any],
    user_context: UserContext,
    quality_provider: Optional[QualitySignalProvider] = None,
    config: Optional[RankingConfig] = None,
    now: Optional[datetime] = None,
    spice: Optional[SpicePolicy] = None,
) -> List[FeedEntry]:
    """
    Run gate → scoring → ranking → diversity → spice → assembly on retrieved rows.

    `now` pins the clock for recency (defaults to the current UTC time).
    """
    config = resolve_config(config)
    now = now or utc_now()
    candidates = gate_candidates(rows, user_context.blocked_deal_ids)
    scored = score_candidates(candidates, user_context, _resolve_quality(quality_provider, config), config, now)
    return _finish(scored, config, spice)


def create_feed(
    user_context: UserContext,
    retriever: CandidateRetriever,
    quality_provider: Optional[QualitySignalProvider] = None,
    config: Optional[RankingConfig] = None,
    now: Optional[datetime] = None,
    spice: Optional[SpicePolicy] = None,
) -> List[FeedEntry]:
    """
    Build the ranked feed for one user/location.

    Raises:
        RetrievalError: the nearby-deals lookup failed; no partial feed is produced.
    """
    config = resolve_config(config)

    # Stage 1: nearby candidates (empty short-circuits everything else)
    rows = retrieve_candidates(retriever, user_context.location, config)
    if not rows:
        logger.info("[feed] user=%s no nearby deals", user_context.user_id)
        return []

    feed = rank_candidates(rows, user_context, quality_provider, config, now, spice)
    logger.info("[feed] user=%s retrieved=%d returned=%d", user_context.user_id, len(rows), len(feed))
    return feed


async def create_feed_async(
    user_context: UserContext,
    retriever: CandidateRetriever,
    quality_provider: Optional[QualitySignalProvider] = None,
    config: Optional[RankingConfig] = None,
    now: Optional[datetime] = None,
    spice: Optional[SpicePolicy] = None,
) -> List[FeedEntry]:
    """Async create_feed: awaits the retriever and scores candidates concurrently."""
    config = resolve_config(config)
    now = now or utc_now()

    # Stage 1: nearby candidates
    rows = await retrieve_candidates_async(retriever, user_context.location, config)
    if not rows:
        logger.info("[feed] user=%s no nearby deals", user_context.user_id)
        return []

    # Stage 2: content gate
    candidates = gate_candidates(rows, user_context.blocked_deal_ids)

    # Stages 3-4: per-candidate signals and blend, joined before ranking
    scored = await score_candidates_async(
        candidates, user_context, _resolve_quality(quality_provider, config), config, now
    )

    # Stages 5-8
    feed = _finish(scored, config, spice)
    logger.info("[feed] user=%s retrieved=%d returned=%d", user_context.user_id, len(rows), len(feed))
    return feed
