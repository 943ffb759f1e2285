# restobill/modules/orders/schemas/order_schemas.py

from datetime import datetime, timezone
from typing import List, Optional
import uuid

from pydantic import Field, field_validator, model_validator

from restobill.core.schemas import DocumentModel, coerce_text
from ..enums.order_enums import (
    OrderStatus,
    OrderType,
    PaymentMode,
    DeliveryMethod,
    TERMINAL_STATUSES,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class OrderLineItem(DocumentModel):
    """
    One row of an order's cart.

    ``id`` identifies this row; ``menu_item_id`` points back at the catalog
    entry. Name and price are snapshots taken when the item was added.
    """

    id: str = Field(default_factory=new_id)
    menu_item_id: str
    name: str
    price: float = Field(..., ge=0)
    quantity: int = Field(1, ge=0)
    note: str = ""


class Order(DocumentModel):
    """Order document; monetary fields are maintained by the lifecycle service"""

    id: str = Field(default_factory=new_id)
    table_id: str
    items: List[OrderLineItem] = Field(default_factory=list)
    status: OrderStatus = OrderStatus.ACTIVE
    created_at: datetime = Field(default_factory=utc_now)
    completed_at: Optional[datetime] = None

    subtotal: float = Field(0.0, ge=0)
    tax_amount: float = Field(0.0, ge=0)
    service_charge_amount: float = Field(0.0, ge=0)
    discount_amount: float = Field(0.0, ge=0)
    total: float = Field(0.0, ge=0)

    order_type: OrderType = OrderType.EAT_IN
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    note: Optional[str] = None
    payment_mode: Optional[PaymentMode] = None
    delivery_method: Optional[DeliveryMethod] = None

    @field_validator("customer_name", "customer_phone", mode="before")
    @classmethod
    def read_customer_text(cls, v):
        return coerce_text(v)

    @field_validator("payment_mode", "delivery_method", mode="before")
    @classmethod
    def unknown_choice_as_unset(cls, v, info):
        # Values written by other clients that we do not recognise count as unset
        choices = PaymentMode if info.field_name == "payment_mode" else DeliveryMethod
        if v is None:
            return None
        try:
            return choices(v)
        except (ValueError, TypeError):
            return None

    @model_validator(mode="after")
    def check_completed_at(self):
        if (self.status == OrderStatus.COMPLETED) != (self.completed_at is not None):
            raise ValueError("completed_at must be set if and only if status is completed")
        return self

    @property
    def is_active(self) -> bool:
        return self.status == OrderStatus.ACTIVE

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def find_line_item(self, line_item_id: str) -> Optional[OrderLineItem]:
        for item in self.items:
            if item.id == line_item_id:
                return item
        return None


# Request schemas


class AddItemRequest(DocumentModel):
    menu_item_id: str


class ChangeQuantityRequest(DocumentModel):
    delta: int


class ItemNoteRequest(DocumentModel):
    note: str = Field("", max_length=500)


class OrderTypeRequest(DocumentModel):
    order_type: OrderType


class CustomerDetailsRequest(DocumentModel):
    customer_name: Optional[str] = Field(None, max_length=100)
    customer_phone: Optional[str] = Field(None, max_length=20)


class CompleteOrderRequest(DocumentModel):
    payment_mode: PaymentMode = PaymentMode.CASH
    delivery_method: DeliveryMethod = DeliveryMethod.NONE


class DeliveryMethodRequest(DocumentModel):
    delivery_method: DeliveryMethod
    customer_phone: Optional[str] = Field(None, max_length=20)
