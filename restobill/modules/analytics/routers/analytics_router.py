# restobill/modules/analytics/routers/analytics_router.py

from fastapi import APIRouter, Depends, Query

from restobill.core.deps import get_pos_service
from restobill.modules.pos.services.pos_service import PosService
from ..enums.analytics_enums import ReportRange
from ..schemas.analytics_schemas import LedgerPage, SalesReport

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/sales", response_model=SalesReport)
async def sales_report(
    range: ReportRange = Query(ReportRange.WEEKLY),
    search: str = Query("", max_length=100),
    pos: PosService = Depends(get_pos_service),
):
    """Sales series, payment and delivery mix, and the transaction ledger"""
    return pos.sales_report(range, search)


@router.get("/transactions", response_model=LedgerPage)
async def search_transactions(
    search: str = Query("", max_length=100),
    pos: PosService = Depends(get_pos_service),
):
    """Completed orders matching customer name, phone or order id"""
    return pos.analytics.search_ledger(list(pos.state.orders.values()), search)
