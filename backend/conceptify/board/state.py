"""
Board State

The single owned object behind one editing session: placement engine,
VLAN registry and the config both are built from. Routes receive it via
dependency injection; nothing here is a module-level global.
"""

from __future__ import annotations

import logging

from conceptify.board.export import derive_config
from conceptify.board.placement import PlacementEngine
from conceptify.board.regions import regions_for
from conceptify.board.vlans import VlanRegistry
from conceptify.config import AppConfig
from conceptify.models.board import BoardView, DerivedEntity, Region, Snapshot
from conceptify.models.vlan import Vlan

logger = logging.getLogger(__name__)


class Board:
    """Items, cells, ids and VLANs of one whiteboard."""

    def __init__(self, config: AppConfig | None = None):
        self.config = config or AppConfig()
        board_config = self.config.board
        self.engine = PlacementEngine(
            grid_size=board_config.grid_size,
            pack_types=[t.type_tag for t in self.config.device_types if t.pack],
            default_template=board_config.default_template,
        )
        self.vlans = VlanRegistry(
            Vlan(id=seed.id, name=seed.name, color=seed.color)
            for seed in board_config.default_vlans
        )

    def toggle_role(self, item_id: str, role: str) -> bool:
        """
        Flip one role on an item.

        Roles outside the item type's role set are ignored, as are
        unknown items.
        """
        item = self.engine.get(item_id)
        if item is None or role not in self.config.roles_for(item.type_tag):
            return False
        return self.engine.set_roles(item_id, item.roles ^ {role})

    def supports_advanced(self, type_tag: str) -> bool:
        device_type = self.config.device_type(type_tag)
        return bool(device_type and device_type.advanced)

    def regions(self) -> list[Region]:
        return regions_for(
            self.vlans.all(),
            self.engine.items,
            padding=self.config.board.region_padding,
            cell_size=self.engine.grid_size,
        )

    def export_config(self) -> dict[str, list[DerivedEntity]]:
        configs = derive_config(self.engine.items)
        logger.info(
            "Generated config: %d groups, %d entities",
            len(configs),
            sum(len(entities) for entities in configs.values()),
        )
        return configs

    def view(self) -> BoardView:
        return BoardView(
            items=self.engine.items,
            vlans=self.vlans.all(),
            occupancy=self.engine.occupancy.as_dict(),
            regions=self.regions(),
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Replace items and VLANs with a snapshot's copy."""
        self.engine.load(item.model_copy(deep=True) for item in snapshot.whiteboard_items)
        self.vlans.replace_all(snapshot.vlans)
        logger.info(
            "Restored board session: %d items, %d VLANs",
            len(snapshot.whiteboard_items),
            len(snapshot.vlans),
        )
