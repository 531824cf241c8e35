"""
VLAN Region Calculator

Derives the dashed frame drawn around the members of each VLAN. Regions
are recomputed from scratch on every call; nothing is cached.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from conceptify.models.board import Region
from conceptify.models.item import Item
from conceptify.models.vlan import Vlan


def regions_for(
    vlans: Iterable[Vlan],
    items: Sequence[Item],
    padding: int,
    cell_size: int,
) -> list[Region]:
    """
    Bounding region per VLAN that has at least one placed member.

    Bounds cover member top-left corners, grown by ``padding`` on every
    side plus one ``cell_size`` on the right and bottom so the last
    member's whole cell is inside.
    """
    regions: list[Region] = []

    for vlan in vlans:
        members = [item.position for item in items if vlan.id in item.member_vlans()]
        if not members:
            continue

        left = min(p.left for p in members) - padding
        top = min(p.top for p in members) - padding
        right = max(p.left for p in members) + cell_size + padding
        bottom = max(p.top for p in members) + cell_size + padding

        regions.append(Region(
            vlan_id=vlan.id,
            name=vlan.name,
            color=vlan.color,
            left=left,
            top=top,
            width=right - left,
            height=bottom - top,
        ))

    return regions
