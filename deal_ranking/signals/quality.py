"""
Quality signal abstraction.

The pipeline only depends on QualitySignalProvider, so a real quality or
reputation model can replace the placeholder without touching the stages.
"""

from typing import Protocol

from ..models.candidate import Candidate


class QualitySignalProvider(Protocol):
    """Protocol for per-deal quality. Scores are in [0, 1)."""

    def score(self, candidate: Candidate) -> float:
        ...

    async def score_async(self, candidate: Candidate) -> float:
        """Async path for providers that call out to a model or store."""
        ...


class IdBucketQualityProvider:
    """
    Placeholder quality: the first UTF-16 code unit of the deal id, bucketed
    into `buckets` slots and scaled to [0, 1).

    Deterministic for a given id, carries no real quality information.
    """

    def __init__(self, buckets: int = 10):
        if buckets < 1:
            raise ValueError("buckets must be at least 1")
        self._buckets = buckets

    def score(self, candidate: Candidate) -> float:
        if not candidate.deal_id:
            return 0.0
        # Characters outside the BMP bucket by their high surrogate
        first_unit = int.from_bytes(candidate.deal_id[0].encode("utf-16-le")[:2], "little")
        return (first_unit % self._buckets) / self._buckets

    async def score_async(self, candidate: Candidate) -> float:
        """Async path: pure computation, same as score."""
        return self.score(candidate)
