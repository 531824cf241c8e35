# API routers
from .board import router as board_router
from .catalog import router as catalog_router
from .session import router as session_router
from .vlans import router as vlans_router

__all__ = ["board_router", "catalog_router", "session_router", "vlans_router"]
