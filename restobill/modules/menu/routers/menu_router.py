# restobill/modules/menu/routers/menu_router.py

from typing import List

from fastapi import APIRouter, Depends, Query

from restobill.core.deps import get_pos_service
from restobill.modules.pos.services.pos_service import PosService
from ..schemas.menu_schemas import MenuItem
from ..services.menu_service import ALL_CATEGORIES, categories, filter_menu

router = APIRouter(prefix="/menu", tags=["Menu"])


@router.get("", response_model=List[MenuItem])
async def list_menu(
    category: str = Query(ALL_CATEGORIES),
    search: str = Query("", max_length=100),
    pos: PosService = Depends(get_pos_service),
):
    return filter_menu(pos.state.menu.values(), category, search)


@router.get("/categories", response_model=List[str])
async def list_categories(pos: PosService = Depends(get_pos_service)):
    return categories(pos.state.menu.values())


@router.put("/{item_id}", response_model=MenuItem)
async def save_menu_item(
    item_id: str, item: MenuItem, pos: PosService = Depends(get_pos_service)
):
    return await pos.save_menu_item(item.model_copy(update={"id": item_id}))


@router.delete("/{item_id}", status_code=204)
async def delete_menu_item(item_id: str, pos: PosService = Depends(get_pos_service)):
    await pos.delete_menu_item(item_id)
