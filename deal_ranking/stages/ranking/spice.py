"""
Spice — move the lowest-ranked deal into the visible window.

Despite the historical "randomness" name this is deterministic: for feeds of
at least min_length deals, the last deal is popped and reinserted at
insert_index. Policies are plain callables so a randomized one can be swapped
in without touching the pipeline.
"""

from typing import List, Protocol, TypeVar

T = TypeVar("T")


class SpicePolicy(Protocol):
    def __call__(self, ranked: List[T]) -> List[T]:
        ...


class TailToWindowSpice:
    """Pop the last entry and reinsert it at insert_index (defaults: length >= 5, index 3)."""

    def __init__(self, min_length: int = 5, insert_index: int = 3):
        if not 0 <= insert_index < min_length:
            raise ValueError("insert_index must be in [0, min_length)")
        self.min_length = min_length
        self.insert_index = insert_index

    def __call__(self, ranked: List[T]) -> List[T]:
        if len(ranked) < self.min_length:
            return ranked
        lowest = ranked.pop()
        ranked.insert(self.insert_index, lowest)
        return ranked


def inject_spice(ranked: List[T], min_length: int = 5, insert_index: int = 3) -> List[T]:
    """Apply the default tail-to-window policy in place and return the list."""
    return TailToWindowSpice(min_length, insert_index)(ranked)
