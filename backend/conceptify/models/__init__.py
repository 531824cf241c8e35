# Pydantic models
from .item import (
    AdvancedSettings,
    IpMode,
    Item,
    PackGroup,
    PackItem,
    PerformanceTier,
    PlacementCandidate,
    Position,
    SimpleItem,
)
from .vlan import Vlan, VlanColorUpdate
from .board import BoardView, DerivedEntity, PlacementOutcome, PlacementResult, Region, Snapshot

__all__ = [
    "AdvancedSettings",
    "IpMode",
    "Item",
    "PackGroup",
    "PackItem",
    "PerformanceTier",
    "PlacementCandidate",
    "Position",
    "SimpleItem",
    "Vlan",
    "VlanColorUpdate",
    "BoardView",
    "DerivedEntity",
    "PlacementOutcome",
    "PlacementResult",
    "Region",
    "Snapshot",
]
