"""Session API routes: save, restore and clear the board, export config."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..board import Board, SessionStore, config_document
from ..dependencies import get_board, get_session_store
from ..models.board import DerivedEntity
from ..websocket import broadcast_board

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/session/save")
async def save_session(
    board: Board = Depends(get_board),
    store: SessionStore = Depends(get_session_store),
):
    """Save the board. The copy is kept for the session TTL (10 minutes)."""
    snapshot = await store.save(board.engine.items, board.vlans.all())
    if snapshot is None:
        raise HTTPException(status_code=503, detail="Session storage unavailable")
    return {
        "status": "saved",
        "timestamp": snapshot.timestamp,
        "expiresInMs": store.ttl_ms,
    }


@router.post("/session/restore")
async def restore_session(
    board: Board = Depends(get_board),
    store: SessionStore = Depends(get_session_store),
):
    """
    Restore the last saved board.

    Missing, expired or unreadable snapshots leave the board as it is and
    report ``restored: false``.
    """
    snapshot = await store.load()
    if snapshot is None:
        return {"restored": False}

    board.restore(snapshot)
    await broadcast_board(board)
    return {"restored": True, "board": board.view()}


@router.delete("/session")
async def clear_session(store: SessionStore = Depends(get_session_store)):
    """Delete the saved board and cancel its expiry."""
    await store.clear()
    return {"status": "cleared"}


@router.get("/export", response_model=dict[str, list[DerivedEntity]])
async def export_config(board: Board = Depends(get_board)):
    """Get the derived configuration, grouped by device or template type."""
    configs = board.export_config()
    logger.debug("Export document: %s", config_document(configs))
    return configs
