"""Board engine: placement, grouping, export and session persistence."""

from conceptify.board.identity import IdentityAllocator
from conceptify.board.occupancy import OccupancyIndex, key_of
from conceptify.board.placement import PlacementEngine, snap_coordinate
from conceptify.board.regions import regions_for
from conceptify.board.export import config_document, derive_config
from conceptify.board.vlans import VlanConflictError, VlanRegistry
from conceptify.board.session import SessionStore
from conceptify.board.state import Board

__all__ = [
    "IdentityAllocator",
    "OccupancyIndex",
    "key_of",
    "PlacementEngine",
    "snap_coordinate",
    "regions_for",
    "config_document",
    "derive_config",
    "VlanConflictError",
    "VlanRegistry",
    "SessionStore",
    "Board",
]
