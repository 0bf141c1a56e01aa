"""Age-based order status.

Orders move through a simulated kitchen and delivery timeline:
received for the first 20 seconds, preparing until 60 seconds, then out
for delivery. Anything with a ``created_at`` (and, for ``advance``, a
``status``) can be passed as the order.
"""
from datetime import datetime

from storefront.services.ordering.models import OrderStatus

PREPARING_AFTER_SECONDS = 20
OUT_FOR_DELIVERY_AFTER_SECONDS = 60


def status_for(order, now: datetime) -> OrderStatus:
    """Status of ``order`` as observed at ``now``."""
    age = (now - order.created_at).total_seconds()
    if age < PREPARING_AFTER_SECONDS:
        return OrderStatus.ORDER_RECEIVED
    if age < OUT_FOR_DELIVERY_AFTER_SECONDS:
        return OrderStatus.PREPARING
    return OrderStatus.OUT_FOR_DELIVERY


def advance(order, now: datetime) -> OrderStatus:
    """Clock status for ``order``, never moving backwards from its current status."""
    current = OrderStatus(order.status)
    computed = status_for(order, now)
    return computed if computed.rank > current.rank else current
