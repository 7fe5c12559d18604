"""Application state: config, ranking config, retriever, and preference providers."""

import logging
from typing import Optional

from deal_ranking import (
    CandidateRetriever,
    IdBucketQualityProvider,
    QualitySignalProvider,
    RankingConfig,
)

from .config import ServerConfig, get_config
from .services import (
    BlockedContentProvider,
    CuisinePreferenceProvider,
    JsonCandidateRetriever,
    StaticBlockedContentProvider,
    StaticCuisinePreferenceProvider,
    SupabaseCandidateRetriever,
)

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        retriever: Optional[CandidateRetriever] = None,
        cuisine_provider: Optional[CuisinePreferenceProvider] = None,
        blocked_provider: Optional[BlockedContentProvider] = None,
        quality_provider: Optional[QualitySignalProvider] = None,
        ranking_config: Optional[RankingConfig] = None,
    ):
        self.config = config
        self.ranking_config = ranking_config or config.load_ranking_config()

        self.retriever = retriever or self._create_retriever(config)
        logger.info("[startup] Candidate retriever: %s", type(self.retriever).__name__)

        self.cuisine_provider = cuisine_provider or StaticCuisinePreferenceProvider()
        self.blocked_provider = blocked_provider or StaticBlockedContentProvider()
        self.quality_provider = quality_provider or IdBucketQualityProvider(
            self.ranking_config.quality_buckets
        )

    @staticmethod
    def _create_retriever(config: ServerConfig) -> CandidateRetriever:
        """Create retriever (JSON file when CANDIDATE_SOURCE=json, else Supabase RPC)."""
        ok, errors = config.validate()
        if not ok:
            raise ValueError("Invalid server configuration: " + "; ".join(errors))
        if config.candidate_source == "json":
            return JsonCandidateRetriever(config.deals_json_path)
        return SupabaseCandidateRetriever(
            config.supabase_url,
            config.supabase_anon_key,
            timeout=config.retrieval_timeout_seconds,
        )


_state: Optional[AppState] = None


def get_state() -> AppState:
    """Get the global state instance (built from env config on first use)."""
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (tests inject stub collaborators this way)."""
    global _state
    _state = state


def reset_state() -> None:
    set_state(None)
