"""
Content gate — drop blocked and malformed candidates.

Runs right after retrieval. Removes deals the user should not see
(reported/flagged ids) and rows that cannot be ranked (None, not a mapping,
missing deal_id or template/title). Never raises and never reorders.

The public entry point is gate_candidates.
"""

import logging
from typing import AbstractSet, Any, Iterable, List

from ..models.candidate import Candidate, parse_candidate

logger = logging.getLogger(__name__)


def _not_blocked(candidate: Candidate, blocked_deal_ids: AbstractSet[str]) -> bool:
    return candidate.deal_id not in blocked_deal_ids


def gate_candidates(
    rows: Iterable[Any],
    blocked_deal_ids: AbstractSet[str],
) -> List[Candidate]:
    """
    Return candidates that parse and are not blocked, in input order.

    Output length is always <= input length.
    """
    candidates: List[Candidate] = []
    malformed = 0
    blocked = 0
    for row in rows:
        candidate = parse_candidate(row)
        if candidate is None:
            malformed += 1
            continue
        if not _not_blocked(candidate, blocked_deal_ids):
            blocked += 1
            continue
        candidates.append(candidate)
    if malformed or blocked:
        logger.debug("[gate] dropped malformed=%d blocked=%d kept=%d", malformed, blocked, len(candidates))
    return candidates
