# restobill/modules/staff/schemas/staff_schemas.py

from datetime import datetime, timezone
from typing import Optional
import uuid

from pydantic import Field

from restobill.core.schemas import DocumentModel
from ..enums.staff_enums import StaffRole, AttendanceStatus


class Staff(DocumentModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1, max_length=100)
    role: StaffRole = StaffRole.WAITER
    phone: str = ""
    email: Optional[str] = None
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: AttendanceStatus = AttendanceStatus.PRESENT
