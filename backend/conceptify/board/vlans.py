"""VLAN registry: the board's list of user-defined VLANs."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from conceptify.models.vlan import Vlan

logger = logging.getLogger(__name__)


class VlanConflictError(ValueError):
    """A new or recolored VLAN clashes with an existing id, name or color."""


class VlanRegistry:
    """Ordered VLAN list with unique ids, names and colors."""

    def __init__(self, vlans: Iterable[Vlan] = ()):
        self._vlans: list[Vlan] = list(vlans)

    def all(self) -> list[Vlan]:
        return list(self._vlans)

    def get(self, vlan_id: int) -> Vlan | None:
        for vlan in self._vlans:
            if vlan.id == vlan_id:
                return vlan
        return None

    def add(self, vlan: Vlan) -> Vlan:
        """Append a VLAN. Raises VlanConflictError on a duplicate."""
        for existing in self._vlans:
            if existing.id == vlan.id:
                raise VlanConflictError(f"VLAN id {vlan.id} already exists")
            if existing.name.casefold() == vlan.name.casefold():
                raise VlanConflictError(f"VLAN name '{vlan.name}' already exists")
            if existing.color == vlan.color:
                raise VlanConflictError(f"Color {vlan.color} is already used by VLAN {existing.id}")

        self._vlans.append(vlan)
        logger.debug("Added VLAN %d (%s)", vlan.id, vlan.name)
        return vlan

    def set_color(self, vlan_id: int, color: str) -> Vlan | None:
        """Recolor a VLAN. Returns None if the id is unknown."""
        for slot, vlan in enumerate(self._vlans):
            if vlan.id != vlan_id:
                continue
            taken_by = next((v for v in self._vlans if v.color == color and v.id != vlan_id), None)
            if taken_by is not None:
                raise VlanConflictError(f"Color {color} is already used by VLAN {taken_by.id}")
            updated = vlan.model_copy(update={"color": color})
            self._vlans[slot] = updated
            return updated
        return None

    def replace_all(self, vlans: Iterable[Vlan]) -> None:
        self._vlans = list(vlans)
