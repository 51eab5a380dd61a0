"""
Order lifecycle state machine.

pending -> preparing -> out-for-delivery -> delivered, plus deletion out of pending.
Updates may write any non-delivered status from any non-delivered status; delivered is terminal
and can never be written through an update.
"""
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"


ALL_STATUSES: list[str] = [s.value for s in OrderStatus]

# Targets accepted by an order update
UPDATABLE_STATUSES: list[str] = [
    OrderStatus.PENDING.value,
    OrderStatus.PREPARING.value,
    OrderStatus.OUT_FOR_DELIVERY.value,
]

DEFAULT_STATUS = OrderStatus.PENDING.value


def is_known_status(status) -> bool:
    return status in ALL_STATUSES


def is_terminal(status) -> bool:
    return status == OrderStatus.DELIVERED.value


def can_update(current_status, new_status) -> bool:
    """True if an update may move an order from current_status to new_status."""
    if is_terminal(current_status):
        return False
    return new_status in UPDATABLE_STATUSES


def can_delete(current_status) -> bool:
    return current_status == OrderStatus.PENDING.value
