"""Order API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import Field

from storefront.core.dependencies import get_order_ledger
from storefront.core.schemas import CamelModel
from storefront.services.errors import InfrastructureError, NotFound, OrderValidationError
from storefront.services.ordering.models import Customer, LineRequest, Order
from storefront.services.persistence.orders import OrderLedger

router = APIRouter()
logger = logging.getLogger(__name__)


class CreateOrderRequest(CamelModel):
    """Create order request model."""

    items: List[LineRequest] = []
    customer: Customer = Field(default_factory=Customer)


@router.post("/api/orders", response_model=Order, status_code=201)
async def create_order(
    order_req: CreateOrderRequest,
    request: Request,
    ledger: OrderLedger = Depends(get_order_ledger),
):
    """Place an order."""
    logger.info(
        f"[ORDERS] Create request - {len(order_req.items)} lines, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        order = await ledger.create_order(order_req.items, order_req.customer)
    except OrderValidationError as e:
        logger.info(f"[ORDERS] Order rejected - {type(e).__name__}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except InfrastructureError as e:
        logger.error(f"[ORDERS] Error creating order - Error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create order")

    return order


@router.get("/api/orders/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    ledger: OrderLedger = Depends(get_order_ledger),
):
    """Get an order with its current status."""
    logger.debug(f"[ORDERS] Fetch request - order: {order_id}")

    try:
        order = await ledger.get_order(order_id)
    except InfrastructureError as e:
        logger.error(f"[ORDERS] Error fetching order {order_id} - Error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error fetching order")

    if order is None:
        raise NotFound("Order", order_id)
    return order
