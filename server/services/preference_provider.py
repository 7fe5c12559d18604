"""
User preference providers.

Supply the per-user inputs of the ranking core: preferred cuisines (relevance)
and blocked/reported deals (content gate). The static implementations stand
in until real preference and moderation stores exist.
"""

from typing import Iterable, Optional, Protocol, Set

DEFAULT_PREFERRED_CUISINES = frozenset({"cuisine-id-mexican", "cuisine-id-italian"})
DEFAULT_REPORTED_DEALS = frozenset({"reported-deal-id-1", "reported-deal-id-2"})


class CuisinePreferenceProvider(Protocol):
    """Protocol for a user's preferred cuisine ids."""

    def get_preferred_cuisines(self, user_id: Optional[str]) -> Set[str]:
        ...

    async def get_preferred_cuisines_async(self, user_id: Optional[str]) -> Set[str]:
        ...


class BlockedContentProvider(Protocol):
    """Protocol for deal ids hidden from a user (reported, flagged)."""

    def get_blocked_deal_ids(self, user_id: Optional[str]) -> Set[str]:
        ...

    async def get_blocked_deal_ids_async(self, user_id: Optional[str]) -> Set[str]:
        ...


class StaticCuisinePreferenceProvider:
    """Same cuisine set for every user."""

    def __init__(self, cuisine_ids: Iterable[str] = DEFAULT_PREFERRED_CUISINES):
        self._cuisine_ids = frozenset(cuisine_ids)

    def get_preferred_cuisines(self, user_id: Optional[str]) -> Set[str]:
        return set(self._cuisine_ids)

    async def get_preferred_cuisines_async(self, user_id: Optional[str]) -> Set[str]:
        return self.get_preferred_cuisines(user_id)


class StaticBlockedContentProvider:
    """Same blocked set for every user."""

    def __init__(self, deal_ids: Iterable[str] = DEFAULT_REPORTED_DEALS):
        self._deal_ids = frozenset(deal_ids)

    def get_blocked_deal_ids(self, user_id: Optional[str]) -> Set[str]:
        return set(self._deal_ids)

    async def get_blocked_deal_ids_async(self, user_id: Optional[str]) -> Set[str]:
        return self.get_blocked_deal_ids(user_id)
