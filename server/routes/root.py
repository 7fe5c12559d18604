"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()

SERVICE_NAME = "Deal Feed Ranking API"
SERVICE_VERSION = "1.0.0"


@router.get("/")
def root():
    return {
        "name": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "endpoints": {
            "feed": ["/api/feed"],
            "health": ["/api/health"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "retriever": type(state.retriever).__name__,
        "radius_miles": state.ranking_config.radius_miles,
    }
