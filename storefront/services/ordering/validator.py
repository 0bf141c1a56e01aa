"""Order validation service."""
from typing import List

from storefront.services.errors import EmptyOrder, InvalidCustomer, InvalidQuantity, UnknownItem
from storefront.services.menu.catalog import Catalog
from storefront.services.ordering.models import Customer, LineRequest, OrderLine

CUSTOMER_FIELDS = ("name", "address", "phone")


class OrderValidator:
    """Service for validating orders against the catalog."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def validate_customer(self, customer: Customer) -> Customer:
        """Reject blank customer fields; return the customer with fields trimmed."""
        for field in CUSTOMER_FIELDS:
            if not getattr(customer, field).strip():
                raise InvalidCustomer(field)
        return Customer(
            name=customer.name.strip(),
            address=customer.address.strip(),
            phone=customer.phone.strip(),
        )

    async def validate_lines(self, lines: List[LineRequest]) -> List[OrderLine]:
        """
        Resolve requested lines against the current catalog.

        Lines are checked in order; for each, an unknown item is reported
        before a bad quantity.

        Returns:
            Order lines with name and price snapshotted from the menu
        """
        if not lines:
            raise EmptyOrder()

        menu_items = await self.catalog.get_items(line.item_id for line in lines)

        order_lines = []
        for line in lines:
            menu_item = menu_items.get(line.item_id)
            if menu_item is None:
                raise UnknownItem(line.item_id)
            if line.quantity <= 0:
                raise InvalidQuantity(line.item_id, line.quantity)
            order_lines.append(
                OrderLine(
                    item_id=line.item_id,
                    name=menu_item.name,
                    price=menu_item.price,
                    quantity=line.quantity,
                )
            )
        return order_lines
