# restobill/modules/settings/routers/settings_router.py

from fastapi import APIRouter, Depends

from restobill.core.deps import get_pos_service
from restobill.modules.pos.services.pos_service import PosService
from ..schemas.settings_schemas import StoreSettings, StoreSettingsUpdate

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=StoreSettings)
async def get_settings(pos: PosService = Depends(get_pos_service)):
    return pos.state.settings


@router.patch("", response_model=StoreSettings)
async def update_settings(
    changes: StoreSettingsUpdate, pos: PosService = Depends(get_pos_service)
):
    """Change store details or tax/service charge rates"""
    return await pos.update_settings(changes)
