# restobill/modules/staff/routers/staff_router.py

from typing import List

from fastapi import APIRouter, Depends

from restobill.core.deps import get_pos_service
from restobill.modules.pos.services.pos_service import PosService
from ..schemas.staff_schemas import Staff

router = APIRouter(prefix="/staff", tags=["Staff"])


@router.get("", response_model=List[Staff])
async def list_staff(pos: PosService = Depends(get_pos_service)):
    return list(pos.state.staff.values())


@router.put("/{staff_id}", response_model=Staff)
async def save_staff(
    staff_id: str, staff: Staff, pos: PosService = Depends(get_pos_service)
):
    return await pos.save_staff(staff.model_copy(update={"id": staff_id}))


@router.post("/{staff_id}/attendance", response_model=Staff)
async def toggle_attendance(staff_id: str, pos: PosService = Depends(get_pos_service)):
    """Flip a staff member between present and absent"""
    return await pos.toggle_attendance(staff_id)


@router.delete("/{staff_id}", status_code=204)
async def delete_staff(staff_id: str, pos: PosService = Depends(get_pos_service)):
    await pos.delete_staff(staff_id)
