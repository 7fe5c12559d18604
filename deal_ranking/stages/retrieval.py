"""
Candidate retrieval — contract for the geospatial nearby-deals lookup.

The lookup itself lives outside the ranking core (e.g. a PostGIS RPC). Rows
come back already annotated with distance_miles. Any failure aborts the whole
request; there is no retry here.
"""

import logging
from typing import Any, Dict, List, Protocol

from ..errors import RetrievalError
from ..models.config import DEFAULT_CONFIG, RankingConfig
from ..models.context import Location

logger = logging.getLogger(__name__)


class CandidateRetriever(Protocol):
    """Protocol for nearby-deal lookup. Implement for Supabase RPC, JSON file, or in-memory rows."""

    def nearby_deals(self, lat: float, lng: float, radius_miles: float) -> List[Dict[str, Any]]:
        """Return raw deal rows within radius_miles of (lat, lng). Raises RetrievalError on failure."""
        ...

    async def nearby_deals_async(self, lat: float, lng: float, radius_miles: float) -> List[Dict[str, Any]]:
        ...


def _checked(rows: Any) -> List[Any]:
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise RetrievalError(f"expected a list of deals, got {type(rows).__name__}")
    return rows


def retrieve_candidates(
    retriever: CandidateRetriever,
    location: Location,
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[Any]:
    """Stage 1: fetch nearby rows. Errors of any kind surface as RetrievalError."""
    try:
        rows = retriever.nearby_deals(location.lat, location.lng, config.radius_miles)
    except RetrievalError:
        raise
    except Exception as e:
        raise RetrievalError(str(e)) from e
    return _checked(rows)


async def retrieve_candidates_async(
    retriever: CandidateRetriever,
    location: Location,
    config: RankingConfig = DEFAULT_CONFIG,
) -> List[Any]:
    try:
        rows = await retriever.nearby_deals_async(location.lat, location.lng, config.radius_miles)
    except RetrievalError:
        raise
    except Exception as e:
        raise RetrievalError(str(e)) from e
    return _checked(rows)
