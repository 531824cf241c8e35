"""VLAN API routes."""

from fastapi import APIRouter, Depends, HTTPException

from ..board import Board, VlanConflictError
from ..dependencies import get_board
from ..models.vlan import Vlan, VlanColorUpdate
from ..websocket import broadcast_board

router = APIRouter()


@router.get("/vlans", response_model=list[Vlan])
async def list_vlans(board: Board = Depends(get_board)):
    """List all VLANs in creation order."""
    return board.vlans.all()


@router.post("/vlans", response_model=Vlan, status_code=201)
async def create_vlan(vlan: Vlan, board: Board = Depends(get_board)):
    """Create a VLAN. Id, name and color must all be unused."""
    try:
        created = board.vlans.add(vlan)
    except VlanConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

    await broadcast_board(board)
    return created


@router.patch("/vlans/{vlan_id}", response_model=Vlan)
async def update_vlan_color(
    vlan_id: int,
    update: VlanColorUpdate,
    board: Board = Depends(get_board),
):
    """Recolor a VLAN."""
    try:
        updated = board.vlans.set_color(vlan_id, update.color)
    except VlanConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if updated is None:
        raise HTTPException(status_code=404, detail=f"VLAN {vlan_id} not found")

    await broadcast_board(board)
    return updated
