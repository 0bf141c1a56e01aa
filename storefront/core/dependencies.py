"""FastAPI dependencies."""
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import Settings
from storefront.db.database import get_db
from storefront.services.access.guard import AccessGuard
from storefront.services.menu.catalog import Catalog
from storefront.services.persistence.orders import OrderLedger


def get_settings(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return request.app.state.settings


def get_catalog(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Catalog:
    """Get catalog bound to the request session."""
    return Catalog(db, seed_file=settings.menu_seed_file)


def get_order_ledger(
    db: AsyncSession = Depends(get_db),
    catalog: Catalog = Depends(get_catalog),
) -> OrderLedger:
    """Get order ledger bound to the request session."""
    return OrderLedger(db, catalog)


def get_access_guard(request: Request) -> AccessGuard:
    """Get the access guard selected at startup."""
    return request.app.state.access_guard


async def require_admin(
    x_admin_secret: Optional[str] = Header(default=None),
    guard: AccessGuard = Depends(get_access_guard),
) -> bool:
    """Dependency to require the admin secret. Denial surfaces as a 401."""
    guard.require(x_admin_secret)
    return True
