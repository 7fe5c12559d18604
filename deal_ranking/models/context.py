"""
UserContext — per-request, read-only view of the user being ranked for.
"""

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class UserContext(BaseModel):
    """
    Who the feed is for and what we know about them.

    preferred_cuisine_ids: cuisines that earn the full cuisine relevance score.
    blocked_deal_ids: deals removed by the content gate (reported/flagged).
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    location: Location
    preferred_cuisine_ids: FrozenSet[str] = frozenset()
    blocked_deal_ids: FrozenSet[str] = frozenset()
