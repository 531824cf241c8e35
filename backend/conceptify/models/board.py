"""Board-level models: placement results, regions, exports and snapshots."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ValidationInfo, model_validator

from .base import CamelModel
from .item import Item
from .vlan import Vlan


class PlacementOutcome(str, Enum):
    CREATED = "created"
    MOVED = "moved"
    OUT_OF_BOUNDS = "out_of_bounds"
    BLOCKED = "blocked"
    UNKNOWN_ITEM = "unknown_item"


class PlacementResult(CamelModel):
    """Outcome of a drop. Only CREATED and MOVED change the board."""

    outcome: PlacementOutcome
    item: Optional[Item] = None

    @property
    def applied(self) -> bool:
        return self.outcome in (PlacementOutcome.CREATED, PlacementOutcome.MOVED)


class Region(CamelModel):
    """Bounding frame drawn behind the members of one VLAN."""

    vlan_id: int
    name: str
    color: str
    left: int
    top: int
    width: int
    height: int


class DerivedEntity(BaseModel):
    """One exported machine/device record."""

    id: str
    roles: list[str] = []
    vlans: list[int] = []


class Snapshot(CamelModel):
    """Point-in-time copy of the board as written to the session store."""

    timestamp: int  # epoch millis
    whiteboard_items: list[Item] = []
    vlans: list[Vlan] = []

    @model_validator(mode="after")
    def check_consistency(self, info: ValidationInfo) -> "Snapshot":
        ids = [item.id for item in self.whiteboard_items]
        if len(ids) != len(set(ids)):
            raise ValueError("snapshot contains duplicate item ids")
        cells = [item.position for item in self.whiteboard_items]
        if len(cells) != len(set(cells)):
            raise ValueError("snapshot places two items on the same cell")
        vlan_ids = [vlan.id for vlan in self.vlans]
        if len(vlan_ids) != len(set(vlan_ids)):
            raise ValueError("snapshot contains duplicate VLAN ids")
        names = [vlan.name.casefold() for vlan in self.vlans]
        if len(names) != len(set(names)):
            raise ValueError("snapshot contains duplicate VLAN names")
        colors = [vlan.color for vlan in self.vlans]
        if len(colors) != len(set(colors)):
            raise ValueError("snapshot contains duplicate VLAN colors")

        # Pass {"grid_size": n} as validation context to require snapped positions
        grid_size = (info.context or {}).get("grid_size")
        if grid_size:
            for position in cells:
                if position.left % grid_size or position.top % grid_size:
                    raise ValueError(
                        f"item at {position.left},{position.top} is off the {grid_size}px grid"
                    )
        return self


class BoardView(CamelModel):
    """Everything the UI needs to redraw the board."""

    items: list[Item] = []
    vlans: list[Vlan] = []
    occupancy: dict[str, str] = {}
    regions: list[Region] = []
