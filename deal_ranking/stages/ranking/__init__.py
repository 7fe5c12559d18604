"""
Scoring and ranking: blend relevance, quality, and recency into a sorted list,
then apply restaurant diversity and spice.

Public API: score_candidates, score_candidates_async, rank_scored.
- core: scoring fan-out, sort, diversity.
- Submodules: relevance, recency, blended_scoring, restaurant_diversity, spice.
"""

from .blended_scoring import build_scored_candidate, combine_scores
from .core import rank_scored, score_candidates, score_candidates_async, sort_by_score
from .restaurant_diversity import apply_restaurant_diversity
from .spice import SpicePolicy, TailToWindowSpice, inject_spice

__all__ = [
    "SpicePolicy",
    "TailToWindowSpice",
    "apply_restaurant_diversity",
    "build_scored_candidate",
    "combine_scores",
    "inject_spice",
    "rank_scored",
    "score_candidates",
    "score_candidates_async",
    "sort_by_score",
]
