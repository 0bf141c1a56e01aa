"""Menu API endpoints."""
import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from storefront.core.config import Settings
from storefront.core.dependencies import get_catalog, get_settings
from storefront.services.errors import InfrastructureError
from storefront.services.menu.base import MenuPage, Pagination
from storefront.services.menu.catalog import Catalog

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/menu", response_model=MenuPage)
async def get_menu(
    request: Request,
    page: int = 1,
    search: Optional[str] = None,
    page_size: Optional[int] = Query(default=None, alias="pageSize", ge=1),
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Get one page of the menu, optionally filtered by a search term."""
    page = max(1, page)
    page_size = min(page_size or settings.menu_page_size, settings.menu_max_page_size)
    query = search.strip() if search else ""
    logger.info(
        f"[MENU] Request received - page: {page}, page_size: {page_size}, "
        f"search: {query!r}, Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        if query:
            items = await catalog.search_items(query, page, page_size)
            total = await catalog.search_count(query)
        else:
            items = await catalog.list_items(page, page_size)
            total = await catalog.count()
    except InfrastructureError as e:
        logger.error(f"[MENU] Error fetching menu - Error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error fetching menu")

    logger.info(f"[MENU] Menu page loaded - {len(items)} of {total} items")
    return MenuPage(
        items=items,
        pagination=Pagination(
            page=page,
            page_size=page_size,
            total=total,
            total_pages=math.ceil(total / page_size),
        ),
    )
