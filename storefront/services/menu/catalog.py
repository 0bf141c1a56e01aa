"""Menu catalog."""
import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.db.database import store_errors
from storefront.db.models import MenuItemRecord
from storefront.services.errors import DuplicateItem
from storefront.services.menu.base import MenuItem
from storefront.services.menu.seed import load_seed_items

logger = logging.getLogger(__name__)

# Largest OFFSET/LIMIT a SQL backend accepts (signed 64-bit)
MAX_SQL_INT = 2**63 - 1


def _to_item(record: MenuItemRecord) -> MenuItem:
    return MenuItem(
        id=record.id,
        name=record.name,
        description=record.description,
        price=record.price,
        image=record.image,
    )


class Catalog:
    """Orderable menu items, read in stable insertion order.

    Pages are 1-indexed; a page below 1 is clamped to 1 and a page past the
    end is empty. The catalog seeds itself from the default menu the first
    time it is read while empty.
    """

    def __init__(self, db: AsyncSession, seed_file: Optional[str] = None):
        self.db = db
        self.seed_file = seed_file
        self._seeded = False

    async def ensure_seeded(self) -> bool:
        """Seed the default menu if the catalog is empty. Returns True if seeded."""
        if self._seeded:
            return False
        self._seeded = True

        async with store_errors("catalog seed", self.db):
            existing = await self.db.scalar(select(func.count()).select_from(MenuItemRecord))
            if existing:
                return False

            items = load_seed_items(self.seed_file)
            for item in items:
                self.db.add(MenuItemRecord(**item.model_dump()))
            try:
                await self.db.commit()
            except IntegrityError:
                # Another request seeded first
                await self.db.rollback()
                logger.info("Catalog already seeded by a concurrent request")
                return False

        logger.info(f"Seeded catalog with {len(items)} default items")
        return True

    async def list_items(self, page: int, page_size: int) -> List[MenuItem]:
        """Get the page-th slice of all items."""
        return await self._page(select(MenuItemRecord), page, page_size)

    async def search_items(self, query: str, page: int, page_size: int) -> List[MenuItem]:
        """Get the page-th slice of items whose name or description contains query."""
        return await self._page(
            select(MenuItemRecord).where(self._matches(query)), page, page_size
        )

    async def count(self) -> int:
        """Total number of items."""
        await self.ensure_seeded()
        async with store_errors("catalog count", self.db):
            return await self.db.scalar(select(func.count()).select_from(MenuItemRecord))

    async def search_count(self, query: str) -> int:
        """Number of items matching query."""
        await self.ensure_seeded()
        async with store_errors("catalog search count", self.db):
            return await self.db.scalar(
                select(func.count())
                .select_from(MenuItemRecord)
                .where(self._matches(query))
            )

    async def get_item(self, item_id: str) -> Optional[MenuItem]:
        """Get a menu item by id."""
        items = await self.get_items([item_id])
        return items.get(item_id)

    async def get_items(self, item_ids: Iterable[str]) -> Dict[str, MenuItem]:
        """Get menu items by id. Unknown ids are absent from the result."""
        await self.ensure_seeded()
        wanted = set(item_ids)
        if not wanted:
            return {}
        async with store_errors("catalog lookup", self.db):
            result = await self.db.execute(
                select(MenuItemRecord).where(MenuItemRecord.id.in_(wanted))
            )
            return {record.id: _to_item(record) for record in result.scalars().all()}

    async def add_item(self, item: MenuItem) -> MenuItem:
        """Add a new item to the end of the catalog."""
        await self.ensure_seeded()
        if await self.get_item(item.id) is not None:
            raise DuplicateItem(item.id)

        async with store_errors("catalog add", self.db):
            self.db.add(MenuItemRecord(**item.model_dump()))
            try:
                await self.db.commit()
            except IntegrityError as e:
                await self.db.rollback()
                raise DuplicateItem(item.id) from e

        logger.info(f"Added menu item '{item.id}'")
        return item

    @staticmethod
    def _matches(query: str):
        needle = query.strip().lower()
        return or_(
            func.lower(MenuItemRecord.name).contains(needle, autoescape=True),
            func.lower(MenuItemRecord.description).contains(needle, autoescape=True),
        )

    async def _page(self, statement, page: int, page_size: int) -> List[MenuItem]:
        await self.ensure_seeded()
        page = max(1, page)
        page_size = min(max(1, page_size), MAX_SQL_INT)
        offset = (page - 1) * page_size
        if offset > MAX_SQL_INT:
            return []
        async with store_errors("catalog page", self.db):
            result = await self.db.execute(
                statement.order_by(MenuItemRecord.seq)
                .offset(offset)
                .limit(page_size)
            )
            return [_to_item(record) for record in result.scalars().all()]
