"""Pipeline stages: retrieval contract, content gate, ranking, assembly, orchestration."""

from .assemble import assemble_feed
from .gate import gate_candidates
from .orchestrator import create_feed, create_feed_async, rank_candidates
from .retrieval import CandidateRetriever, retrieve_candidates, retrieve_candidates_async

__all__ = [
    "CandidateRetriever",
    "assemble_feed",
    "create_feed",
    "create_feed_async",
    "gate_candidates",
    "rank_candidates",
    "retrieve_candidates",
    "retrieve_candidates_async",
]
