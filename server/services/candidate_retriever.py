"""
Candidate retrievers — implementations of the nearby-deals lookup.

Implementations: Supabase PostgREST RPC (production), JSON file (local
testing), in-memory rows (tests/demos). Swap via CANDIDATE_SOURCE.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests

from deal_ranking import RetrievalError

logger = logging.getLogger(__name__)

NEARBY_DEALS_RPC = "nearby_deals"


class SupabaseCandidateRetriever:
    """
    Calls the nearby_deals PostGIS function through Supabase's REST RPC endpoint.
    Rows come back with distance_miles and a nested deal_template.
    """

    def __init__(self, url: str, anon_key: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        if not url or not anon_key:
            raise ValueError("Supabase url and anon key are required")
        self._endpoint = f"{url.rstrip('/')}/rest/v1/rpc/{NEARBY_DEALS_RPC}"
        self._headers = {
            "apikey": anon_key,
            "Authorization": f"Bearer {anon_key}",
            "Content-Type": "application/json",
        }
        self._timeout = timeout
        self._session = session or requests.Session()

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"HTTP {response.status_code}"

    def nearby_deals(self, lat: float, lng: float, radius_miles: float) -> List[Dict[str, Any]]:
        payload = {"lat": lat, "long": lng, "radius_miles": radius_miles}
        try:
            response = self._session.post(
                self._endpoint, json=payload, headers=self._headers, timeout=self._timeout
            )
        except requests.Timeout as e:
            raise RetrievalError(f"timed out after {self._timeout}s") from e
        except requests.RequestException as e:
            raise RetrievalError(str(e)) from e

        if not response.ok:
            message = self._error_message(response)
            logger.warning("[retrieval] %s failed: %s", NEARBY_DEALS_RPC, message)
            raise RetrievalError(message)

        try:
            rows = response.json()
        except ValueError as e:
            raise RetrievalError("response was not valid JSON") from e
        if rows is None:
            return []
        if not isinstance(rows, list):
            raise RetrievalError(f"expected a list of deals, got {type(rows).__name__}")
        logger.debug("[retrieval] %s returned %d rows", NEARBY_DEALS_RPC, len(rows))
        return rows

    async def nearby_deals_async(self, lat: float, lng: float, radius_miles: float) -> List[Dict[str, Any]]:
        """Async path: runs the blocking HTTP call in a worker thread."""
        return await asyncio.to_thread(self.nearby_deals, lat, lng, radius_miles)


class StaticCandidateRetriever:
    """
    Retriever over rows held in memory. Rows must already carry distance_miles
    (as the geospatial index would); rows farther than the radius are dropped,
    rows with no distance are kept.
    """

    def __init__(self, rows: List[Dict[str, Any]]):
        self._rows = list(rows)

    @staticmethod
    def _within(row: Any, radius_miles: float) -> bool:
        if not isinstance(row, dict):
            return True  # the gate decides what to do with malformed rows
        distance = row.get("distance_miles")
        if not isinstance(distance, (int, float)) or isinstance(distance, bool):
            return True
        return distance <= radius_miles

    def nearby_deals(self, lat: float, lng: float, radius_miles: float) -> List[Dict[str, Any]]:
        return [row for row in self._rows if self._within(row, radius_miles)]

    async def nearby_deals_async(self, lat: float, lng: float, radius_miles: float) -> List[Dict[str, Any]]:
        """Async path: in-memory, same as nearby_deals."""
        return self.nearby_deals(lat, lng, radius_miles)


class JsonCandidateRetriever(StaticCandidateRetriever):
    """
    Retriever backed by a JSON file of nearby_deals rows.
    Used when CANDIDATE_SOURCE=json; path comes from DEALS_JSON_PATH.
    """

    def __init__(self, deals_path: Union[Path, str]):
        self._deals_path = Path(deals_path)
        if not self._deals_path.exists():
            raise FileNotFoundError(f"Deals JSON not found: {self._deals_path}")
        with open(self._deals_path) as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValueError(f"Deals JSON must contain a list: {self._deals_path}")
        super().__init__(rows)
