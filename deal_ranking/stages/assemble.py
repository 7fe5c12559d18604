"""Feed assembly — project the final ranking to FeedEntry, dropping all score fields."""

from typing import List

from ..models.feed import FeedEntry
from ..models.scoring import ScoredCandidate


def assemble_feed(ranked: List[ScoredCandidate]) -> List[FeedEntry]:
    return [FeedEntry(deal_id=s.candidate.deal_id, title=s.candidate.title) for s in ranked]
