"""
Semantic validators for dish and order payloads. Run after the field-presence guards.
"""
import math

from grubdash.chain import RequestContext
from grubdash.errors import InvalidInput
from grubdash.order_state import (
    ALL_STATUSES,
    can_delete,
    can_update,
    is_known_status,
    is_terminal,
)

STATUS_MESSAGE = f"Order must have a status of {', '.join(ALL_STATUSES)}"


def is_positive_number(value) -> bool:
    """Finite int/float > 0. Booleans are not numbers here; integrality is not checked."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


# Dishes

def price_is_valid(ctx: RequestContext):
    if not is_positive_number(ctx.data.get("price")):
        return InvalidInput("Dish must have a price that is an integer greater than zero")
    return None


# Orders

def first_invalid_quantity(dishes: list) -> int | None:
    """Scan every line item; return the lowest index whose quantity is not a positive number."""
    offending = [
        index
        for index, item in enumerate(dishes)
        if not (isinstance(item, dict) and is_positive_number(item.get("quantity")))
    ]
    return offending[0] if offending else None


def dishes_is_valid(ctx: RequestContext):
    dishes = ctx.data.get("dishes")
    if not isinstance(dishes, list) or not dishes:
        return InvalidInput("Order must include at least one dish")
    index = first_invalid_quantity(dishes)
    if index is not None:
        return InvalidInput(f"Dish {index} must have quantity this is an integer greater than 0")
    return None


def status_is_known(ctx: RequestContext):
    """Create path: an explicit status must be one of the lifecycle values."""
    if "status" in ctx.data and not is_known_status(ctx.data["status"]):
        return InvalidInput(STATUS_MESSAGE)
    return None


def status_is_valid(ctx: RequestContext):
    """Update path: resolved order must be in ctx.locals["order"]."""
    status = ctx.data.get("status")
    current = ctx.locals["order"].get("status")
    if is_terminal(status) or is_terminal(current):
        return InvalidInput("A delivered order cannot be changed")
    if not status or not can_update(current, status):
        return InvalidInput(STATUS_MESSAGE)
    return None


def status_is_pending(ctx: RequestContext):
    if not can_delete(ctx.locals["order"].get("status")):
        return InvalidInput("An order cannot be deleted unless it is pending")
    return None
