"""
Order lifecycle as a lookup table.

    WAITING -> ACCEPTED -> SERVED -> COMPLETED                          (EAT_IN, TAKEOUT)
    WAITING -> ACCEPTED -> SERVED -> DELIVERING -> DELIVERED -> COMPLETED (DELIVERY)

COMPLETED is terminal: no key starts from it.
"""
from common.exceptions import IllegalStatus

from .models import OrderStatus, OrderType

# (order type, current status) -> statuses the order may move to next
ALLOWED_TRANSITIONS = {
    (OrderType.DELIVERY, OrderStatus.WAITING): frozenset({OrderStatus.ACCEPTED}),
    (OrderType.DELIVERY, OrderStatus.ACCEPTED): frozenset({OrderStatus.SERVED}),
    (OrderType.DELIVERY, OrderStatus.SERVED): frozenset({OrderStatus.DELIVERING}),
    (OrderType.DELIVERY, OrderStatus.DELIVERING): frozenset({OrderStatus.DELIVERED}),
    (OrderType.DELIVERY, OrderStatus.DELIVERED): frozenset({OrderStatus.COMPLETED}),

    (OrderType.TAKEOUT, OrderStatus.WAITING): frozenset({OrderStatus.ACCEPTED}),
    (OrderType.TAKEOUT, OrderStatus.ACCEPTED): frozenset({OrderStatus.SERVED}),
    (OrderType.TAKEOUT, OrderStatus.SERVED): frozenset({OrderStatus.COMPLETED}),

    (OrderType.EAT_IN, OrderStatus.WAITING): frozenset({OrderStatus.ACCEPTED}),
    (OrderType.EAT_IN, OrderStatus.ACCEPTED): frozenset({OrderStatus.SERVED}),
    (OrderType.EAT_IN, OrderStatus.SERVED): frozenset({OrderStatus.COMPLETED}),
}


def allowed_next_statuses(order_type, status):
    return ALLOWED_TRANSITIONS.get((OrderType(order_type), OrderStatus(status)), frozenset())


def can_transition(order_type, status, next_status):
    return OrderStatus(next_status) in allowed_next_statuses(order_type, status)


def require_transition(order, next_status):
    if not can_transition(order.type, order.status, next_status):
        raise IllegalStatus(
            f"{order.type} order {order.id} cannot move from {order.status} to {next_status}"
        )
