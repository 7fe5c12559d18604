"""Feed endpoint: rank nearby deals for a user."""

import asyncio
import logging
from typing import List

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from deal_ranking import Location, RetrievalError, UserContext, create_feed_async

from ..models import ErrorResponse, FeedItem, FeedRequest
from ..state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()


async def _user_context(request: FeedRequest) -> UserContext:
    """Gather cuisine preferences and blocked deals concurrently."""
    state = get_state()
    preferred, blocked = await asyncio.gather(
        state.cuisine_provider.get_preferred_cuisines_async(request.user_id),
        state.blocked_provider.get_blocked_deal_ids_async(request.user_id),
    )
    return UserContext(
        user_id=request.user_id,
        location=Location(lat=request.location.latitude, lng=request.location.longitude),
        preferred_cuisine_ids=frozenset(preferred or ()),
        blocked_deal_ids=frozenset(blocked or ()),
    )


@router.post(
    "",
    response_model=List[FeedItem],
    responses={500: {"model": ErrorResponse}},
)
async def get_feed(request: FeedRequest):
    """Ranked deal feed for the user at the given location. Empty list when nothing qualifies."""
    state = get_state()
    try:
        user_context = await _user_context(request)
    except Exception as e:
        logger.warning("[feed] user=%s preference lookup failed: %s", request.user_id, e)
        return JSONResponse(status_code=500, content={"error": f"Preference lookup failed: {e}"})
    try:
        feed = await create_feed_async(
            user_context,
            state.retriever,
            quality_provider=state.quality_provider,
            config=state.ranking_config,
        )
    except RetrievalError as e:
        logger.warning("[feed] user=%s retrieval failed: %s", request.user_id, e)
        return JSONResponse(status_code=500, content={"error": f"RPC Error: {e}"})
    return [FeedItem(deal_id=entry.deal_id, title=entry.title) for entry in feed]
