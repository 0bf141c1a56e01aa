"""Administrative API endpoints."""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from storefront.core.dependencies import (
    get_access_guard,
    get_catalog,
    get_order_ledger,
    require_admin,
)
from storefront.services.access.guard import AccessGuard
from storefront.services.errors import DuplicateItem, InfrastructureError, NotFound
from storefront.services.menu.base import MenuItem
from storefront.services.menu.catalog import Catalog
from storefront.services.ordering.models import Order, OrderStatus
from storefront.services.persistence.orders import OrderLedger

router = APIRouter()
logger = logging.getLogger(__name__)


class LoginRequest(BaseModel):
    """Login request model."""
    password: Optional[str] = None


class StatusUpdateRequest(BaseModel):
    """Status update request model; any value is accepted and checked against OrderStatus."""
    status: Any = None


@router.post("/api/admin/login")
async def login(
    login_req: LoginRequest,
    guard: AccessGuard = Depends(get_access_guard),
):
    """Check the admin secret. Issues no session; clients send the secret per request."""
    if login_req.password is None:
        raise HTTPException(status_code=400, detail="Password is required")
    if not guard.authorize(login_req.password):
        logger.warning("[ADMIN] Login failed - invalid password")
        raise HTTPException(status_code=401, detail="Invalid password")
    return {"success": True}


@router.get(
    "/api/admin/orders",
    response_model=List[Order],
    dependencies=[Depends(require_admin)],
)
async def list_orders(ledger: OrderLedger = Depends(get_order_ledger)):
    """Get all orders."""
    try:
        orders = await ledger.list_orders()
    except InfrastructureError as e:
        logger.error(f"[ADMIN] Error listing orders - Error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error fetching orders")

    logger.info(f"[ADMIN] Listed {len(orders)} orders")
    return orders


@router.patch(
    "/api/admin/orders/{order_id}",
    response_model=Order,
    dependencies=[Depends(require_admin)],
)
async def update_order_status(
    order_id: str,
    update: StatusUpdateRequest,
    ledger: OrderLedger = Depends(get_order_ledger),
):
    """Overwrite an order's status."""
    try:
        status = OrderStatus(update.status)
    except (ValueError, TypeError):
        raise HTTPException(
            status_code=400,
            detail="Invalid status. Use ORDER_RECEIVED, PREPARING, or OUT_FOR_DELIVERY",
        )

    try:
        order = await ledger.set_status(order_id, status)
    except InfrastructureError as e:
        logger.error(f"[ADMIN] Error updating order {order_id} - Error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error updating order")

    if order is None:
        raise NotFound("Order", order_id)
    return order


@router.post(
    "/api/admin/menu",
    response_model=MenuItem,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_menu_item(
    item: MenuItem,
    catalog: Catalog = Depends(get_catalog),
):
    """Add an item to the menu."""
    try:
        created = await catalog.add_item(item)
    except DuplicateItem as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InfrastructureError as e:
        logger.error(f"[ADMIN] Error adding menu item {item.id} - Error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error adding menu item")

    logger.info(f"[ADMIN] Menu item created - {created.id}")
    return created
