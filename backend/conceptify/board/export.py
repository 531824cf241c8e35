"""
Config Deriver

Turns the board into the exportable configuration document: derived
entities grouped by device type, or by template type for pack items.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from conceptify.models.board import DerivedEntity
from conceptify.models.item import Item, PackItem


def instance_id(template_type: str, item_id: str, index: int) -> str:
    """Identity of the ``index``-th (1-based) machine expanded from a pack."""
    return f"{template_type}-{item_id}-{index}"


def derive_config(items: Iterable[Item]) -> dict[str, list[DerivedEntity]]:
    """
    Expand board items into derived entities keyed by group.

    Pack items emit ``instance_count`` entities under their template type,
    all sharing the pack's roles and group VLANs. Every other item emits
    one entity under its type tag. Order follows the item order, then the
    instance index.
    """
    configs: dict[str, list[DerivedEntity]] = {}

    for item in items:
        roles = sorted(item.roles)
        if isinstance(item, PackItem):
            group = item.group
            vlans = sorted(group.vlan_memberships)
            entities = configs.setdefault(group.template_type, [])
            for index in range(1, group.instance_count + 1):
                entities.append(DerivedEntity(
                    id=instance_id(group.template_type, item.id, index),
                    roles=roles,
                    vlans=vlans,
                ))
        else:
            configs.setdefault(item.type_tag, []).append(DerivedEntity(
                id=item.id,
                roles=roles,
                vlans=sorted(item.vlan_memberships),
            ))

    return configs


def config_document(configs: dict[str, list[DerivedEntity]]) -> dict[str, list[dict[str, Any]]]:
    """JSON-ready form of ``derive_config`` output."""
    return {
        group_key: [entity.model_dump() for entity in entities]
        for group_key, entities in configs.items()
    }
