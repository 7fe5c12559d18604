"""Shared utilities for decay scoring and time handling."""

from .scores import half_life_decay, hours_since, utc_now

__all__ = [
    "half_life_decay",
    "hours_since",
    "utc_now",
]
