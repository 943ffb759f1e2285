# restobill/modules/tables/routers/table_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends

from restobill.core.deps import get_pos_service
from restobill.modules.orders.schemas.order_schemas import AddItemRequest, Order
from restobill.modules.pos.services.pos_service import PosService
from ..schemas.table_schemas import Table, TableMutation, TableOverview

router = APIRouter(prefix="/tables", tags=["Tables"])


@router.get("", response_model=List[Table])
async def list_tables(pos: PosService = Depends(get_pos_service)):
    """All tables with their current occupancy"""
    return list(pos.state.tables.values())


@router.get("/overview", response_model=List[TableOverview])
async def table_overview(pos: PosService = Depends(get_pos_service)):
    """Tables with running totals of their active orders"""
    return pos.table_overview()


@router.get("/{table_id}/order", response_model=Optional[Order])
async def get_active_order(table_id: str, pos: PosService = Depends(get_pos_service)):
    """Active order for a table, or null when the table is free"""
    return pos.active_order_for_table(table_id)


@router.post("/{table_id}/items", response_model=Order)
async def add_item(
    table_id: str,
    request: AddItemRequest,
    pos: PosService = Depends(get_pos_service),
):
    """
    Add one unit of a menu item to the table's order

    Opens a new order and occupies the table when it is free.
    """
    return await pos.add_item(table_id, request.menu_item_id)


@router.post("/reconcile", response_model=List[TableMutation])
async def reconcile_tables(pos: PosService = Depends(get_pos_service)):
    """Release or re-occupy tables that disagree with their orders"""
    return await pos.reconcile_tables()
