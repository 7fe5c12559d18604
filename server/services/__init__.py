"""Collaborators of the ranking core: candidate retrievers and preference providers."""

from .candidate_retriever import (
    JsonCandidateRetriever,
    StaticCandidateRetriever,
    SupabaseCandidateRetriever,
)
from .preference_provider import (
    BlockedContentProvider,
    CuisinePreferenceProvider,
    StaticBlockedContentProvider,
    StaticCuisinePreferenceProvider,
)

__all__ = [
    "BlockedContentProvider",
    "CuisinePreferenceProvider",
    "JsonCandidateRetriever",
    "StaticBlockedContentProvider",
    "StaticCandidateRetriever",
    "StaticCuisinePreferenceProvider",
    "SupabaseCandidateRetriever",
]
