"""Store error types.

Validation errors are raised synchronously by order creation and carry
enough detail to identify the offending field or item. Backing store
failures are reported as ``InfrastructureError`` so callers can tell them
apart from domain errors.
"""
from typing import Optional


class StoreError(Exception):
    """Base class for all store errors."""


class OrderValidationError(StoreError):
    """Order creation rejected by validation."""


class InvalidCustomer(OrderValidationError):
    """A required customer field is blank."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required customer details: {field}")


class EmptyOrder(OrderValidationError):
    """Order has no lines."""

    def __init__(self):
        super().__init__("Order must contain at least one item")


class UnknownItem(OrderValidationError):
    """Order line references an item that is not on the menu."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Invalid menu item: {item_id}")


class InvalidQuantity(OrderValidationError):
    """Order line quantity is zero or negative."""

    def __init__(self, item_id: str, quantity: int):
        self.item_id = item_id
        self.quantity = quantity
        super().__init__(
            f"Quantity must be greater than zero (item {item_id}, got {quantity})"
        )


class DuplicateItem(StoreError):
    """Menu item id already exists in the catalog."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Menu item '{item_id}' already exists")


class NotFound(StoreError):
    """Requested record does not exist."""

    def __init__(self, kind: str, record_id: Optional[str] = None):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found")


class Unauthorized(StoreError):
    """Access guard denied the request."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InfrastructureError(StoreError):
    """Backing store unavailable or failed."""
