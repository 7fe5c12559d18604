"""
Deal Feed Ranking API — FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .routes.root import SERVICE_NAME, SERVICE_VERSION
from .state import get_state

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    configure_logging(config.log_level)
    state = get_state()
    logger.info(
        "[startup] %s ready: retriever=%s radius_miles=%s",
        SERVICE_NAME, type(state.retriever).__name__, state.ranking_config.radius_miles,
    )
    yield


def create_app() -> FastAPI:
    """Build FastAPI app with CORS and routes."""
    app = FastAPI(
        title=SERVICE_NAME,
        description="Ranks nearby deals into a personalized feed",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)
    return app


app = create_app()
