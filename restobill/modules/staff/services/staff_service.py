# restobill/modules/staff/services/staff_service.py

import logging

from restobill.modules.store.services.document_store import Collections, DocumentStore
from ..enums.staff_enums import AttendanceStatus
from ..schemas.staff_schemas import Staff

logger = logging.getLogger(__name__)


class StaffService:
    """Staff roster management and daily attendance"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def save_staff(self, staff: Staff) -> Staff:
        await self.store.save(Collections.STAFF, staff.id, staff.to_document())
        logger.info(f"Saved staff member {staff.id} ({staff.name})")
        return staff

    async def delete_staff(self, staff_id: str) -> None:
        await self.store.delete(Collections.STAFF, staff_id)
        logger.info(f"Deleted staff member {staff_id}")

    async def toggle_attendance(self, staff: Staff) -> Staff:
        """Flip present/absent and persist"""
        updated = staff.model_copy(
            update={
                "status": (
                    AttendanceStatus.ABSENT
                    if staff.status == AttendanceStatus.PRESENT
                    else AttendanceStatus.PRESENT
                )
            }
        )
        return await self.save_staff(updated)
