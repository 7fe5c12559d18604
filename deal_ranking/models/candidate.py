"""
Candidate model — typed representation of a nearby deal for the ranking pipeline.

Built from geospatial lookup rows via parse_candidate(row). Rows come in the
nearby_deals shape, with template fields nested under "deal_template":

    {"deal_id": ..., "created_at": ..., "distance_miles": ...,
     "deal_template": {"title": ..., "cuisine_id": ..., "restaurant_id": ...}}

Flat dicts (template fields at the top level) are accepted too.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)


class Candidate(BaseModel):
    """
    A deal eligible for ranking.

    deal_id and title are required; everything else may be missing and the
    scorers fall back to a zero contribution for absent data.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    deal_id: str
    title: str
    cuisine_id: Optional[str] = None
    restaurant_id: Optional[str] = None
    distance_miles: Optional[float] = None
    created_at: Optional[datetime] = None

    @field_validator("deal_id")
    @classmethod
    def deal_id_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("deal_id must not be blank")
        return v

    @field_validator("distance_miles", mode="before")
    @classmethod
    def normalize_distance(cls, v: Any) -> Optional[float]:
        """Negative, NaN, and non-numeric distances are treated as absent."""
        if v is None or isinstance(v, bool):
            return None
        try:
            miles = float(v)
        except (TypeError, ValueError):
            return None
        if math.isnan(miles) or miles < 0:
            return None
        return miles

    @field_validator("created_at", mode="before")
    @classmethod
    def normalize_created_at(cls, v: Any) -> Optional[datetime]:
        """Parse ISO timestamps; anything unparseable is treated as absent."""
        if isinstance(v, datetime):
            return v if v.tzinfo else v.replace(tzinfo=timezone.utc)
        if not isinstance(v, str) or not v.strip():
            return None
        try:
            dt = datetime.fromisoformat(v.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt


def _flatten_row(row: Mapping[str, Any]) -> Optional[dict]:
    """Lift deal_template fields to the top level. None if the template is unusable."""
    flat = {k: v for k, v in row.items() if k != "deal_template"}
    if "deal_template" in row:
        template = row["deal_template"]
        if not isinstance(template, Mapping):
            return None
        for key, value in template.items():
            flat.setdefault(key, value)
    return flat


def parse_candidate(row: Union[Candidate, Mapping[str, Any], None]) -> Optional[Candidate]:
    """
    Convert a lookup row to a Candidate.

    Returns None for malformed rows (not a mapping, missing deal_id, missing
    template/title) instead of raising.
    """
    if isinstance(row, Candidate):
        return row
    if not isinstance(row, Mapping):
        return None
    flat = _flatten_row(row)
    if flat is None:
        return None
    try:
        return Candidate.model_validate(flat)
    except ValidationError as e:
        logger.debug("[gate] malformed candidate deal_id=%r: %s", row.get("deal_id"), e.error_count())
        return None
