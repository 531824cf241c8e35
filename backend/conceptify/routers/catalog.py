"""Catalog API routes: legend entries and their role sets."""

from fastapi import APIRouter, Depends

from ..board import Board
from ..dependencies import get_board
from ..models.base import CamelModel

router = APIRouter()


class CatalogEntry(CamelModel):
    type_tag: str
    name: str
    icon: str = ""
    roles: list[str] = []
    advanced: bool = False
    pack: bool = False


class Catalog(CamelModel):
    grid_size: int
    device_types: list[CatalogEntry]
    pack_templates: list[str]


@router.get("/catalog", response_model=Catalog)
async def get_catalog(board: Board = Depends(get_board)):
    """Get placeable device types, grid size and pack templates."""
    config = board.config
    return Catalog(
        grid_size=config.board.grid_size,
        device_types=[CatalogEntry(**t.model_dump()) for t in config.device_types],
        pack_templates=config.board.pack_templates,
    )
