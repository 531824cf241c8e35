"""Conceptify Network Whiteboard - FastAPI Application."""

import logging
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .board import Board, SessionStore
from .cache import RedisCache
from .config import get_config, settings
from .routers import board_router, catalog_router, session_router, vlans_router
from .websocket import websocket_endpoint, ws_manager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    # Startup
    config = get_config()
    cache = RedisCache(settings.redis_url)
    await cache.connect()

    scheduler = AsyncIOScheduler()
    scheduler.start()

    app.state.board = Board(config)
    app.state.session_store = SessionStore(
        cache,
        scheduler,
        storage_key=config.session.storage_key,
        ttl_ms=config.session.ttl_ms,
        grid_size=config.board.grid_size,
    )

    # Pick up a board saved within the TTL
    snapshot = await app.state.session_store.load()
    if snapshot is not None:
        app.state.board.restore(snapshot)

    yield

    # Shutdown
    scheduler.shutdown(wait=False)
    await cache.disconnect()
    logger.info("Conceptify stopped")


app = FastAPI(
    title="Conceptify",
    description="Network topology whiteboard API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS configuration
origins = ["*"] if settings.dev_mode else []
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(catalog_router, prefix="/api", tags=["catalog"])
app.include_router(board_router, prefix="/api", tags=["board"])
app.include_router(vlans_router, prefix="/api", tags=["vlans"])
app.include_router(session_router, prefix="/api", tags=["session"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "conceptify",
        "websocketClients": ws_manager.connection_count,
    }


# WebSocket endpoint
app.websocket("/ws/board")(websocket_endpoint)
