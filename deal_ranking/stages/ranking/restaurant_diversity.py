"""
Restaurant diversity — downweight repeated restaurants in an already sorted list.

Single sequential pass with a per-restaurant counter: the k-th deal from the
same restaurant (k > 1) has its weighted_score multiplied by penalty ** (k - 1).
Scores are changed in place and the list is NOT re-sorted, so the result can
be non-monotonic in weighted_score. Deals without a restaurant_id are skipped.
"""

from typing import Dict, List

from ...models.scoring import ScoredCandidate


def apply_restaurant_diversity(
    sorted_list: List[ScoredCandidate],
    penalty: float = 0.8,
) -> List[ScoredCandidate]:
    """
    Penalize repeated restaurants in order of appearance.

    Args:
        sorted_list: Candidates sorted by weighted_score (desc). Scores are mutated.
        penalty: Multiplier per additional deal from the same restaurant (0 < penalty <= 1).

    Returns:
        The same list object, in the same order.
    """
    restaurant_count: Dict[str, int] = {}
    for scored in sorted_list:
        restaurant_id = scored.restaurant_id
        if not restaurant_id:
            continue
        restaurant_count[restaurant_id] = restaurant_count.get(restaurant_id, 0) + 1
        occurrence = restaurant_count[restaurant_id]
        if occurrence > 1:
            scored.weighted_score = scored.weighted_score * (penalty ** (occurrence - 1))
    return sorted_list
