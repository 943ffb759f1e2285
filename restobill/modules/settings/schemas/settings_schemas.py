# restobill/modules/settings/schemas/settings_schemas.py

from typing import Optional

from pydantic import Field

from restobill.core.schemas import DocumentModel

SETTINGS_DOCUMENT_ID = "store_config"


class StoreSettings(DocumentModel):
    """Store-wide configuration read by billing on every recompute"""

    name: str = Field("Spice Garden", min_length=1, max_length=100)
    address: str = ""
    phone: str = ""
    currency: str = Field("₹", max_length=5)
    gst_rate: float = Field(5.0, ge=0, le=100)
    service_charge_rate: float = Field(5.0, ge=0, le=100)


class StoreSettingsUpdate(DocumentModel):
    """Partial settings change; unset fields keep their current value"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = None
    phone: Optional[str] = None
    currency: Optional[str] = Field(None, max_length=5)
    gst_rate: Optional[float] = Field(None, ge=0, le=100)
    service_charge_rate: Optional[float] = Field(None, ge=0, le=100)
