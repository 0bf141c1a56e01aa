"""Menu models."""
from typing import List

from pydantic import Field

from storefront.core.schemas import CamelModel


class MenuItem(CamelModel):
    """Menu item model."""

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    price: float = Field(ge=0)
    image: str = ""


class Pagination(CamelModel):
    """Pagination details for a menu page."""

    page: int
    page_size: int
    total: int
    total_pages: int


class MenuPage(CamelModel):
    """One page of menu items."""

    items: List[MenuItem]
    pagination: Pagination
