# restobill/modules/orders/routers/order_router.py

from fastapi import APIRouter, Depends

from restobill.core.deps import get_pos_service
from restobill.modules.pos.services.pos_service import PosService
from ..schemas.order_schemas import (
    ChangeQuantityRequest,
    CompleteOrderRequest,
    CustomerDetailsRequest,
    DeliveryMethodRequest,
    ItemNoteRequest,
    Order,
    OrderTypeRequest,
)

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: str, pos: PosService = Depends(get_pos_service)):
    return pos.get_order(order_id)


@router.patch("/{order_id}/items/{line_item_id}/quantity", response_model=Order)
async def change_quantity(
    order_id: str,
    line_item_id: str,
    request: ChangeQuantityRequest,
    pos: PosService = Depends(get_pos_service),
):
    """Adjust a line's quantity; a line reaching zero is removed"""
    return await pos.change_quantity(order_id, line_item_id, request.delta)


@router.put("/{order_id}/items/{line_item_id}/note", response_model=Order)
async def set_item_note(
    order_id: str,
    line_item_id: str,
    request: ItemNoteRequest,
    pos: PosService = Depends(get_pos_service),
):
    return await pos.set_item_note(order_id, line_item_id, request.note)


@router.put("/{order_id}/type", response_model=Order)
async def set_order_type(
    order_id: str,
    request: OrderTypeRequest,
    pos: PosService = Depends(get_pos_service),
):
    return await pos.set_order_type(order_id, request.order_type)


@router.put("/{order_id}/customer", response_model=Order)
async def set_customer(
    order_id: str,
    request: CustomerDetailsRequest,
    pos: PosService = Depends(get_pos_service),
):
    return await pos.set_customer(
        order_id, request.customer_name, request.customer_phone
    )


@router.post("/{order_id}/complete", response_model=Order)
async def complete_order(
    order_id: str,
    request: CompleteOrderRequest,
    pos: PosService = Depends(get_pos_service),
):
    """
    Settle an order and free its table

    Fails with 409 if the order is not active and 400 if it has no items.
    """
    return await pos.complete_order(
        order_id, request.payment_mode, request.delivery_method
    )


@router.post("/{order_id}/cancel", response_model=Order)
async def cancel_order(order_id: str, pos: PosService = Depends(get_pos_service)):
    return await pos.cancel_order(order_id)


@router.put("/{order_id}/delivery", response_model=Order)
async def update_delivery_method(
    order_id: str,
    request: DeliveryMethodRequest,
    pos: PosService = Depends(get_pos_service),
):
    """Record how the bill reached the customer"""
    return await pos.update_delivery_method(
        order_id, request.delivery_method, request.customer_phone
    )
