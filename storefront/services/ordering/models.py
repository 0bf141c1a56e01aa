"""Order models."""
from datetime import datetime
from enum import Enum
from typing import List

from pydantic import computed_field

from storefront.core.schemas import CamelModel


class OrderStatus(str, Enum):
    """Order lifecycle status, in forward order."""

    ORDER_RECEIVED = "ORDER_RECEIVED"
    PREPARING = "PREPARING"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"

    @property
    def rank(self) -> int:
        return list(OrderStatus).index(self)


class Customer(CamelModel):
    """Delivery customer details."""

    name: str = ""
    address: str = ""
    phone: str = ""


class LineRequest(CamelModel):
    """Requested order line: a menu item id and a quantity."""

    item_id: str
    quantity: int


class OrderLine(CamelModel):
    """Order line with name and price snapshotted from the menu."""

    item_id: str
    name: str
    price: float
    quantity: int


class Order(CamelModel):
    """Placed order."""

    id: str
    items: List[OrderLine]
    customer: Customer
    status: OrderStatus
    created_at: datetime

    @computed_field
    @property
    def total(self) -> float:
        return round(sum(line.price * line.quantity for line in self.items), 2)
