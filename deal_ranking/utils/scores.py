"""
Score helpers — exponential half-life decay and time utilities used by the scorers.
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hours_since(created_at: Optional[datetime], now: Optional[datetime] = None) -> Optional[float]:
    """
    Hours elapsed since created_at, or None when created_at is missing.
    Timestamps in the future count as zero hours old.
    """
    if created_at is None:
        return None
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    now = now or utc_now()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return max((now - created_at).total_seconds() / 3600.0, 0.0)


def half_life_decay(value: float, half_life: float) -> float:
    """
    Exponential decay 0.5 ** (value / half_life).
    value=0 gives 1.0; each half_life further halves the score.
    """
    return 0.5 ** (value / half_life)
