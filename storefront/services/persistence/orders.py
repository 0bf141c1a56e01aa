"""Order ledger.

Owns placed orders: creates them against catalog validation, serves reads
with lazy status advancement, and applies admin status overrides. Each
public method is its own read/validate/write unit with no cross-call lock;
concurrent status writes to the same order are last-write-wins.
"""
import logging
import secrets
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.db.database import store_errors
from storefront.db.models import OrderRecord, utcnow
from storefront.services.menu.catalog import Catalog
from storefront.services.ordering.models import (
    Customer,
    LineRequest,
    Order,
    OrderLine,
    OrderStatus,
)
from storefront.services.ordering.status_clock import advance
from storefront.services.ordering.validator import OrderValidator

logger = logging.getLogger(__name__)


def new_order_id(now: datetime) -> str:
    """Time-ordered prefix plus a random suffix."""
    millis = int(now.replace(tzinfo=timezone.utc).timestamp() * 1000)
    return f"ord_{millis}_{secrets.token_hex(6)}"


def to_order(record: OrderRecord) -> Order:
    """Convert a stored record to an Order."""
    return Order(
        id=record.id,
        items=[OrderLine.model_validate(line) for line in record.items],
        customer=Customer.model_validate(record.customer),
        status=OrderStatus(record.status),
        created_at=record.created_at.replace(tzinfo=timezone.utc),
    )


class OrderLedger:
    """Service for placing and tracking orders."""

    def __init__(
        self,
        db: AsyncSession,
        catalog: Catalog,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.catalog = catalog
        self.clock = clock
        self.validator = OrderValidator(catalog)

    async def create_order(self, lines: List[LineRequest], customer: Customer) -> Order:
        """
        Validate and persist a new order.

        Raises:
            InvalidCustomer, EmptyOrder, UnknownItem, InvalidQuantity:
                validation failed; nothing was persisted
            InfrastructureError: the backing store failed
        """
        customer = self.validator.validate_customer(customer)
        order_lines = await self.validator.validate_lines(lines)

        now = self.clock()
        record = OrderRecord(
            id=new_order_id(now),
            items=[line.model_dump(by_alias=True) for line in order_lines],
            customer=customer.model_dump(),
            status=OrderStatus.ORDER_RECEIVED.value,
            created_at=now,
            updated_at=now,
        )
        async with store_errors("create order", self.db):
            self.db.add(record)
            await self.db.commit()

        logger.info(
            f"Created order {record.id} - {len(order_lines)} lines, "
            f"customer: {customer.name}"
        )
        return to_order(record)

    async def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by id, advancing its status if the clock has moved on."""
        record = await self._get_record(order_id)
        if record is None:
            return None
        orders = await self._reconcile([record])
        return orders[0]

    async def list_orders(self) -> List[Order]:
        """Get all orders, newest first, each with its status advanced."""
        async with store_errors("list orders", self.db):
            result = await self.db.execute(
                select(OrderRecord).order_by(
                    desc(OrderRecord.created_at), desc(OrderRecord.id)
                )
            )
            records = result.scalars().all()
        return await self._reconcile(records)

    async def set_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        """Overwrite an order's status. Returns None if the order does not exist."""
        record = await self._get_record(order_id)
        if record is None:
            return None

        previous = record.status
        async with store_errors("set status", self.db):
            record.status = status.value
            record.updated_at = self.clock()
            await self.db.commit()

        logger.info(f"Order {order_id} status set: {previous} -> {status.value}")
        return to_order(record)

    async def reset(self) -> int:
        """Delete all orders. Returns the number removed."""
        async with store_errors("reset orders", self.db):
            result = await self.db.execute(delete(OrderRecord))
            await self.db.commit()
        logger.info(f"Ledger reset - {result.rowcount} orders removed")
        return result.rowcount

    async def _get_record(self, order_id: str) -> Optional[OrderRecord]:
        async with store_errors("get order", self.db):
            return await self.db.get(OrderRecord, order_id)

    async def _reconcile(self, records: Iterable[OrderRecord]) -> List[Order]:
        """Advance statuses by the clock and write back any changes.

        The write is best effort: a failure is logged and the advanced
        status is still returned to the reader.
        """
        now = self.clock()
        orders = []
        changed = []
        for record in records:
            status = advance(record, now)
            if status.value != record.status:
                record.status = status.value
                record.updated_at = now
                changed.append(record.id)
            orders.append(to_order(record))

        if changed:
            try:
                await self.db.commit()
                logger.debug(f"Advanced status for orders: {', '.join(changed)}")
            except SQLAlchemyError as e:
                logger.warning(
                    f"Failed to persist advanced status for {', '.join(changed)} - "
                    f"{type(e).__name__}: {e}"
                )
                await self.db.rollback()
        return orders
