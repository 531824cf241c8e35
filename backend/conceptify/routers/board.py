"""Board API routes: drops, deletes and per-item attribute edits."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from ..board import Board
from ..dependencies import get_board
from ..models.base import CamelModel
from ..models.board import BoardView, PlacementResult, Region
from ..models.item import AdvancedSettings, PackGroup, PackItem, PlacementCandidate
from ..websocket import broadcast_board

router = APIRouter()


class DropRequest(CamelModel):
    """A drag released over the canvas."""

    type_tag: str
    item_id: Optional[str] = None  # Set when moving an item already on the board
    x: float = Field(allow_inf_nan=False)
    y: float = Field(allow_inf_nan=False)
    in_bounds: bool = True


class RoleToggle(CamelModel):
    role: str


class VlanMembershipUpdate(CamelModel):
    vlan_ids: list[int] = []


def _check_vlans(board: Board, vlan_ids: set[int]) -> None:
    unknown = sorted(v for v in vlan_ids if board.vlans.get(v) is None)
    if unknown:
        raise HTTPException(status_code=422, detail=f"Unknown VLAN ids: {unknown}")


async def _edited(board: Board, item_id: str, updated: bool) -> dict:
    if updated:
        await broadcast_board(board)
    return {"itemId": item_id, "updated": updated}


@router.get("/board", response_model=BoardView)
async def get_board_view(board: Board = Depends(get_board)):
    """Get items, VLANs, occupied cells and VLAN regions."""
    return board.view()


@router.get("/board/regions", response_model=list[Region])
async def get_regions(board: Board = Depends(get_board)):
    """Get the VLAN frames to draw behind the items."""
    return board.regions()


@router.post("/board/drop", response_model=PlacementResult)
async def drop_item(request: DropRequest, board: Board = Depends(get_board)):
    """
    Place a legend template or move a placed item.

    Drops outside the canvas or onto an occupied cell are reported in
    the outcome and leave the board unchanged.
    """
    if board.config.device_type(request.type_tag) is None:
        raise HTTPException(status_code=422, detail=f"Unknown device type '{request.type_tag}'")

    result = board.engine.place(
        PlacementCandidate(type_tag=request.type_tag, item_id=request.item_id),
        request.x,
        request.y,
        request.in_bounds,
    )
    if result.applied:
        await broadcast_board(board)
    return result


@router.delete("/board/items/{item_id}")
async def delete_item(item_id: str, board: Board = Depends(get_board)):
    """Remove an item from the board. Unknown ids are a no-op."""
    deleted = board.engine.delete(item_id)
    if deleted:
        await broadcast_board(board)
    return {"itemId": item_id, "deleted": deleted}


@router.post("/board/items/{item_id}/roles/toggle")
async def toggle_role(item_id: str, request: RoleToggle, board: Board = Depends(get_board)):
    """Switch one role on or off."""
    return await _edited(board, item_id, board.toggle_role(item_id, request.role))


@router.put("/board/items/{item_id}/vlans")
async def set_item_vlans(
    item_id: str,
    request: VlanMembershipUpdate,
    board: Board = Depends(get_board),
):
    """Replace the VLANs an item belongs to. Pack items take theirs from the group."""
    if isinstance(board.engine.get(item_id), PackItem):
        raise HTTPException(
            status_code=422,
            detail=f"'{item_id}' is a pack; set its VLANs through the group",
        )
    vlan_ids = set(request.vlan_ids)
    _check_vlans(board, vlan_ids)
    return await _edited(board, item_id, board.engine.set_vlan_memberships(item_id, vlan_ids))


@router.put("/board/items/{item_id}/group")
async def set_item_group(item_id: str, group: PackGroup, board: Board = Depends(get_board)):
    """Replace a pack item's instance count, template and VLANs."""
    if group.template_type not in board.config.board.pack_templates:
        raise HTTPException(
            status_code=422,
            detail=f"Unknown template type '{group.template_type}'",
        )
    _check_vlans(board, group.vlan_memberships)
    return await _edited(board, item_id, board.engine.set_group(item_id, group))


@router.put("/board/items/{item_id}/advanced")
async def set_advanced_settings(
    item_id: str,
    settings: AdvancedSettings,
    board: Board = Depends(get_board),
):
    """Set tier, monitoring, login and addressing for a server or workstation."""
    item = board.engine.get(item_id)
    if item is not None and not board.supports_advanced(item.type_tag):
        raise HTTPException(
            status_code=422,
            detail=f"Advanced settings do not apply to '{item.type_tag}'",
        )
    return await _edited(board, item_id, board.engine.set_advanced_settings(item_id, settings))


@router.delete("/board/items/{item_id}/advanced")
async def clear_advanced_settings(item_id: str, board: Board = Depends(get_board)):
    """Drop an item's advanced settings."""
    return await _edited(board, item_id, board.engine.set_advanced_settings(item_id, None))
