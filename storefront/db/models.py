"""Database models."""
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Float, Text, JSON
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Current instant as a naive UTC datetime (the stored representation)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class MenuItemRecord(Base):
    """Menu item record."""

    __tablename__ = "menu_items"

    # Insertion order for stable pagination
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False)
    image = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=utcnow, nullable=False)


class OrderRecord(Base):
    """Order record.

    Lines and customer are stored as JSON documents; line name and price are
    snapshots taken at creation time.
    """

    __tablename__ = "orders"

    id = Column(String, primary_key=True, index=True)
    items = Column(JSON, nullable=False)  # [{itemId, name, price, quantity}]
    customer = Column(JSON, nullable=False)  # {name, address, phone}
    status = Column(String, default="ORDER_RECEIVED", nullable=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
