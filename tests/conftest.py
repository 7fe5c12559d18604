"""Shared fixtures: a pinned clock, a user context, and a row builder in nearby_deals shape."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from deal_ranking import Location, UserContext

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)

PREFERRED = frozenset({"cuisine-id-mexican", "cuisine-id-italian"})
BLOCKED = frozenset({"reported-deal-id-1", "reported-deal-id-2"})


def make_row(
    deal_id: str,
    title: Optional[str] = None,
    cuisine_id: Optional[str] = None,
    restaurant_id: Optional[str] = None,
    distance_miles: Optional[float] = None,
    age_hours: Optional[float] = 0.0,
) -> dict:
    """Row as returned by nearby_deals; age_hours=None leaves created_at out."""
    row = {
        "deal_id": deal_id,
        "distance_miles": distance_miles,
        "deal_template": {
            "title": title if title is not None else f"Deal {deal_id}",
            "cuisine_id": cuisine_id,
            "restaurant_id": restaurant_id,
        },
    }
    if age_hours is not None:
        row["created_at"] = (NOW - timedelta(hours=age_hours)).isoformat()
    return row


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def user_context():
    return UserContext(
        user_id="user-1",
        location=Location(lat=40.7128, lng=-74.0060),
        preferred_cuisine_ids=PREFERRED,
        blocked_deal_ids=BLOCKED,
    )


@pytest.fixture
def regression_rows():
    """
    Six nearby deals: c-taco and b-pasta share restaurant R1, reported-deal-id-1
    is blocked, i-pizza has no created_at, j-burger has no distance.
    """
    return [
        make_row("c-taco", "Taco Tuesday", "cuisine-id-mexican", "R1", 0.0, 0),
        make_row("b-pasta", "Pasta Night", "cuisine-id-italian", "R1", 5.0, 48),
        make_row("a-sushi", "Sushi Combo", "cuisine-id-japanese", "R2", 10.0, 96),
        make_row("j-burger", "Burger Bash", "cuisine-id-american", "R3", None, 0),
        make_row("i-pizza", "Pizza Slice", "cuisine-id-italian", "R4", 0.0, None),
        make_row("reported-deal-id-1", "Reported Deal", "cuisine-id-mexican", "R5", 1.0, 0),
    ]
