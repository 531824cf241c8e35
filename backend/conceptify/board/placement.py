"""
Placement Engine

Applies drops, deletes and attribute edits to the board's item list.
The item list and the occupancy index are one consistency unit: every
method leaves them in agreement before returning.

Rejected drops (outside the canvas, onto another item's cell, or for an
item that no longer exists) are reported in the result, never raised.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Any

from conceptify.board.identity import IdentityAllocator
from conceptify.board.occupancy import OccupancyIndex
from conceptify.models.board import PlacementOutcome, PlacementResult
from conceptify.models.item import (
    AdvancedSettings,
    Item,
    PackGroup,
    PackItem,
    PlacementCandidate,
    Position,
    SimpleItem,
)

logger = logging.getLogger(__name__)


def snap_coordinate(value: float, grid_size: int) -> int:
    """Round to the nearest grid multiple, halves away from zero."""
    cells = math.floor(abs(value) / grid_size + 0.5)
    return int(math.copysign(cells, value)) * grid_size


class PlacementEngine:
    """Owns the placed items, their cells and their ids."""

    def __init__(
        self,
        grid_size: int,
        pack_types: Iterable[str] = (),
        default_template: str = "ubuntu",
    ):
        if grid_size <= 0:
            raise ValueError("grid_size must be positive")
        self.grid_size = grid_size
        self._pack_types = frozenset(pack_types)
        self._default_template = default_template
        self._items: list[Item] = []
        self._index = OccupancyIndex()
        self._ids = IdentityAllocator()

    @property
    def items(self) -> list[Item]:
        """Placed items in insertion order."""
        return list(self._items)

    @property
    def occupancy(self) -> OccupancyIndex:
        return self._index

    @property
    def ids(self) -> IdentityAllocator:
        return self._ids

    def get(self, item_id: str) -> Item | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def snap(self, x: float, y: float) -> Position:
        return Position(
            left=snap_coordinate(x, self.grid_size),
            top=snap_coordinate(y, self.grid_size),
        )

    # ─────────────────────────────────────────────────────────────────────
    # Placement
    # ─────────────────────────────────────────────────────────────────────

    def place(
        self,
        candidate: PlacementCandidate,
        x: float,
        y: float,
        in_bounds: bool,
    ) -> PlacementResult:
        """
        Drop ``candidate`` at canvas point (x, y).

        A candidate with an ``item_id`` moves that item; one without is a
        legend template and creates a new item.
        """
        if not in_bounds:
            return PlacementResult(outcome=PlacementOutcome.OUT_OF_BOUNDS)

        target = self.snap(x, y)
        if self._index.is_blocked(target, candidate.item_id):
            logger.debug("Drop of %s rejected: cell %s,%s occupied",
                         candidate.item_id or candidate.type_tag, target.left, target.top)
            return PlacementResult(outcome=PlacementOutcome.BLOCKED)

        if candidate.item_id is not None:
            return self._move(candidate.item_id, target)
        return self._create(candidate.type_tag, target)

    def _move(self, item_id: str, target: Position) -> PlacementResult:
        slot = self._slot_of(item_id)
        if slot is None:
            return PlacementResult(outcome=PlacementOutcome.UNKNOWN_ITEM)

        item = self._items[slot]
        previous = item.position
        if previous == target:
            return PlacementResult(outcome=PlacementOutcome.MOVED, item=item)

        moved = item.model_copy(update={"position": target})
        self._items[slot] = moved
        self._index.clear(previous)
        self._index.set(target, item_id)

        logger.debug("Moved %s to %s,%s", item_id, target.left, target.top)
        return PlacementResult(outcome=PlacementOutcome.MOVED, item=moved)

    def _create(self, type_tag: str, target: Position) -> PlacementResult:
        item_id = self._ids.next_id(type_tag)
        item: Item
        if type_tag in self._pack_types:
            item = PackItem(
                id=item_id,
                type_tag=type_tag,
                position=target,
                group=PackGroup(instance_count=1, template_type=self._default_template),
            )
        else:
            item = SimpleItem(id=item_id, type_tag=type_tag, position=target)

        self._items.append(item)
        self._index.set(target, item_id)

        logger.debug("Created %s at %s,%s", item_id, target.left, target.top)
        return PlacementResult(outcome=PlacementOutcome.CREATED, item=item)

    def delete(self, item_id: str) -> bool:
        """Remove an item and free its cell. Unknown ids are ignored."""
        slot = self._slot_of(item_id)
        if slot is None:
            return False

        item = self._items.pop(slot)
        self._index.clear(item.position)
        logger.debug("Deleted %s", item_id)
        return True

    # ─────────────────────────────────────────────────────────────────────
    # Attribute edits (no occupancy side effects)
    # ─────────────────────────────────────────────────────────────────────

    def set_roles(self, item_id: str, roles: Iterable[str]) -> bool:
        return self._update(item_id, roles=set(roles))

    def set_vlan_memberships(self, item_id: str, vlan_ids: Iterable[int]) -> bool:
        return self._update(item_id, vlan_memberships=set(vlan_ids))

    def set_group(self, item_id: str, group: PackGroup) -> bool:
        """Replace a pack item's expansion settings. Non-pack items are ignored."""
        if not isinstance(self.get(item_id), PackItem):
            return False
        return self._update(item_id, group=group.model_copy(deep=True))

    def set_advanced_settings(self, item_id: str, settings: AdvancedSettings | None) -> bool:
        return self._update(item_id, advanced_settings=settings)

    def _update(self, item_id: str, **changes: Any) -> bool:
        slot = self._slot_of(item_id)
        if slot is None:
            return False
        self._items[slot] = self._items[slot].model_copy(update=changes)
        return True

    def _slot_of(self, item_id: str) -> int | None:
        for slot, item in enumerate(self._items):
            if item.id == item_id:
                return slot
        return None

    # ─────────────────────────────────────────────────────────────────────
    # Bulk state
    # ─────────────────────────────────────────────────────────────────────

    def load(self, items: Iterable[Item]) -> None:
        """
        Replace the whole board, e.g. from a restored snapshot.

        Items keep their order; the index and id counters are rebuilt
        from them. Callers must pass items with unique ids and cells.
        """
        restored = list(items)
        index = OccupancyIndex()
        for item in restored:
            index.set(item.position, item.id)

        self._items = restored
        self._index = index
        self._ids.reseed(item.id for item in restored)
