"""Data models for the deal ranking pipeline."""

from .candidate import Candidate, parse_candidate
from .config import DEFAULT_CONFIG, RankingConfig, resolve_config
from .context import Location, UserContext
from .feed import FeedEntry
from .scoring import ScoredCandidate

__all__ = [
    "Candidate",
    "DEFAULT_CONFIG",
    "FeedEntry",
    "Location",
    "RankingConfig",
    "ScoredCandidate",
    "UserContext",
    "parse_candidate",
    "resolve_config",
]
