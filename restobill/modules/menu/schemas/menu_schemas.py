# restobill/modules/menu/schemas/menu_schemas.py

from typing import Optional
import uuid

from pydantic import Field

from restobill.core.schemas import DocumentModel


class MenuItem(DocumentModel):
    """Catalog entry. Orders copy name and price at add time."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0)
    cost_price: float = Field(0.0, ge=0)
    category: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = None
