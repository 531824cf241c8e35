"""
Occupancy Index

Authoritative map from grid cell to the id of the item sitting on it.
Only the placement engine mutates it, always together with the item list.
"""

from __future__ import annotations

from conceptify.models.item import Position


def key_of(position: Position) -> str:
    """Cell key for a grid-aligned position, e.g. ``"100,50"``."""
    return f"{position.left},{position.top}"


class OccupancyIndex:
    """At most one item id per cell."""

    def __init__(self):
        self._cells: dict[str, str] = {}

    def occupant_at(self, position: Position) -> str | None:
        return self._cells.get(key_of(position))

    def is_blocked(self, position: Position, moving_id: str | None) -> bool:
        """True if another item (not ``moving_id``) already holds the cell."""
        occupant = self.occupant_at(position)
        return occupant is not None and occupant != moving_id

    def set(self, position: Position, item_id: str) -> None:
        self._cells[key_of(position)] = item_id

    def clear(self, position: Position) -> None:
        self._cells.pop(key_of(position), None)

    def as_dict(self) -> dict[str, str]:
        """Copy of the cell map, for collision cursors in the UI."""
        return dict(self._cells)
