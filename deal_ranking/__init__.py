"""
Deal feed ranking — nearby deals in, ordered feed out.

Single entry point for the ranking package:
- models/: RankingConfig, Candidate, ScoredCandidate, UserContext, FeedEntry
- signals/: QualitySignalProvider and the id-bucket placeholder
- stages/: retrieval contract, gate, ranking (scoring, diversity, spice), assembly, orchestrator
"""

from .errors import RetrievalError
from .models import (
    DEFAULT_CONFIG,
    Candidate,
    FeedEntry,
    Location,
    RankingConfig,
    ScoredCandidate,
    UserContext,
    parse_candidate,
    resolve_config,
)
from .signals import IdBucketQualityProvider, QualitySignalProvider
from .stages import (
    CandidateRetriever,
    create_feed,
    create_feed_async,
    gate_candidates,
    rank_candidates,
)
from .stages.ranking import SpicePolicy, TailToWindowSpice

__all__ = [
    "Candidate",
    "CandidateRetriever",
    "DEFAULT_CONFIG",
    "FeedEntry",
    "IdBucketQualityProvider",
    "Location",
    "QualitySignalProvider",
    "RankingConfig",
    "RetrievalError",
    "ScoredCandidate",
    "SpicePolicy",
    "TailToWindowSpice",
    "UserContext",
    "create_feed",
    "create_feed_async",
    "gate_candidates",
    "parse_candidate",
    "rank_candidates",
    "resolve_config",
]
