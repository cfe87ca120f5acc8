"""
Order lifecycle and table occupancy services
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from functools import partial
from typing import List, Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from catalog.repositories import MenuRepository
from common.exceptions import (
    DeliveryDispatchError, IllegalTableState, InvalidOrder, InvalidQuantity,
    NotFound, OpenOrdersExist, OrderTableNotFound, PriceMismatch
)
from common.validators import require_name, require_quantity

from .delivery import get_delivery_dispatcher
from .models import Order, OrderLineItem, OrderStatus, OrderTable, OrderType
from .repositories import OrderRepository, OrderTableRepository
from .transitions import require_transition

logger = logging.getLogger(__name__)


@dataclass
class OrderLineItemRequest:
    menu_id: Optional[UUID] = None
    quantity: Optional[int] = None
    price: Optional[Decimal] = None


@dataclass
class OrderRequest:
    type: Optional[str] = None
    order_line_items: Optional[List[OrderLineItemRequest]] = field(default_factory=list)
    delivery_address: Optional[str] = None
    order_table_id: Optional[UUID] = None


@dataclass
class OrderTableRequest:
    name: Optional[str] = None
    number_of_guests: Optional[int] = None


class OrderService:
    """
    Drives an order from WAITING to COMPLETED.

    Every transition fails with IllegalStatus unless the order sits in the one
    status its type allows for that step, so repeating a step is an error.
    """

    def __init__(self, order_repository=None, menu_repository=None,
                 order_table_repository=None, delivery_dispatcher=None):
        self.order_repository = order_repository or OrderRepository()
        self.menu_repository = menu_repository or MenuRepository()
        self.order_table_repository = order_table_repository or OrderTableRepository()
        self.delivery_dispatcher = delivery_dispatcher or get_delivery_dispatcher()

    @transaction.atomic
    def create(self, request):
        order_type = self._parse_type(request.type)

        line_item_requests = request.order_line_items
        if not line_item_requests:
            raise InvalidOrder("Order must contain at least one line item")

        menu_ids = {line_item_request.menu_id for line_item_request in line_item_requests}
        menus = self.menu_repository.find_all_by_id(menu_ids)
        if len(menus) != len(menu_ids):
            raise NotFound("Some ordered menus do not exist")

        for line_item_request in line_item_requests:
            if line_item_request.quantity is None:
                raise InvalidQuantity("Quantity is required")
            # eat-in orders are not checked for negative quantities here
            if order_type != OrderType.EAT_IN:
                require_quantity(line_item_request.quantity)

        order_line_items = [
            self._resolve_line_item(line_item_request)
            for line_item_request in line_item_requests
        ]

        if order_type == OrderType.DELIVERY and not request.delivery_address:
            raise InvalidOrder("Delivery orders require a delivery address")

        order_table = None
        if order_type == OrderType.EAT_IN:
            order_table = self.order_table_repository.find_by_id(request.order_table_id)
            if order_table is None:
                raise OrderTableNotFound(f"Order table not found: {request.order_table_id}")
            if order_table.empty:
                raise IllegalTableState(f"Order table {order_table.id} has no guests seated")

        order = Order(
            type=order_type,
            status=OrderStatus.WAITING,
            order_date_time=timezone.now(),
            delivery_address=request.delivery_address,
            order_table=order_table,
        )
        order = self.order_repository.save(order, order_line_items)
        logger.info(f"Order created | id={order.id}, type={order.type}, items={len(order_line_items)}")
        return order

    @transaction.atomic
    def accept(self, order_id):
        order = self._get_order(order_id)
        self._move(order, OrderStatus.ACCEPTED)

        if order.type == OrderType.DELIVERY:
            # dispatch runs only after the status change is committed
            transaction.on_commit(partial(
                self._request_delivery, order.id, order.delivery_address, order.calculate_total()
            ))
        return order

    @transaction.atomic
    def serve(self, order_id):
        order = self._get_order(order_id)
        self._move(order, OrderStatus.SERVED)
        return order

    @transaction.atomic
    def start_delivery(self, order_id):
        order = self._get_order(order_id)
        self._move(order, OrderStatus.DELIVERING)
        return order

    @transaction.atomic
    def complete_delivery(self, order_id):
        order = self._get_order(order_id)
        self._move(order, OrderStatus.DELIVERED)
        return order

    @transaction.atomic
    def complete(self, order_id):
        order = self._get_order(order_id)
        self._move(order, OrderStatus.COMPLETED)

        if order.type == OrderType.EAT_IN:
            order_table = order.order_table
            if not self.order_repository.exists_by_order_table_and_status_not(order_table, OrderStatus.COMPLETED):
                order_table.clear()
                self.order_table_repository.save(order_table)
                logger.info(f"Order table cleared | id={order_table.id}, order={order.id}")
        return order

    def find_all(self):
        return self.order_repository.find_all()

    def _parse_type(self, order_type):
        if order_type is None:
            raise InvalidOrder("Order type is required")
        try:
            return OrderType(order_type)
        except ValueError:
            raise InvalidOrder(f"Unknown order type: {order_type}")

    def _resolve_line_item(self, line_item_request):
        menu = self.menu_repository.find_by_id(line_item_request.menu_id)
        if menu is None:
            raise NotFound(f"Menu not found: {line_item_request.menu_id}")
        if not menu.displayed:
            raise InvalidOrder(f"Menu {menu.id} is not displayed")
        if line_item_request.price is None or menu.price != line_item_request.price:
            raise PriceMismatch(
                f"Line price {line_item_request.price} does not match menu {menu.id} price {menu.price}"
            )
        return OrderLineItem(menu=menu, quantity=line_item_request.quantity, price=line_item_request.price)

    def _get_order(self, order_id):
        order = self.order_repository.find_by_id(order_id)
        if order is None:
            raise NotFound(f"Order not found: {order_id}")
        return order

    def _move(self, order, next_status):
        previous_status = order.status
        require_transition(order, next_status)
        order.status = next_status
        self.order_repository.save(order)
        logger.info(f"Order status changed | id={order.id}, {previous_status} -> {order.status}")

    def _request_delivery(self, order_id, delivery_address, amount):
        # TODO: retry or queue failed dispatches; today the order stays ACCEPTED without a rider
        try:
            self.delivery_dispatcher.request_delivery(order_id, delivery_address, amount)
        except DeliveryDispatchError as e:
            logger.error(f"Delivery dispatch failed, order stays accepted | order={order_id}, error={e}")
        except Exception:
            # the status change is already committed; never fail the caller for it
            logger.exception(f"Unexpected delivery dispatch error, order stays accepted | order={order_id}")


class OrderTableService:
    def __init__(self, order_table_repository=None, order_repository=None):
        self.order_table_repository = order_table_repository or OrderTableRepository()
        self.order_repository = order_repository or OrderRepository()

    @transaction.atomic
    def create(self, request):
        name = require_name(request.name)
        order_table = self.order_table_repository.save(OrderTable(name=name))
        logger.info(f"Order table created | id={order_table.id}")
        return order_table

    @transaction.atomic
    def sit(self, order_table_id):
        order_table = self._get_order_table(order_table_id)
        order_table.sit()
        self.order_table_repository.save(order_table)
        logger.info(f"Guests seated | table={order_table.id}")
        return order_table

    @transaction.atomic
    def clear(self, order_table_id):
        order_table = self._get_order_table(order_table_id)
        if self.order_repository.exists_by_order_table_and_status_not(order_table, OrderStatus.COMPLETED):
            raise OpenOrdersExist(f"Order table {order_table.id} still has open orders")

        order_table.clear()
        self.order_table_repository.save(order_table)
        logger.info(f"Order table cleared | id={order_table.id}")
        return order_table

    @transaction.atomic
    def change_number_of_guests(self, order_table_id, request):
        number_of_guests = require_quantity(request.number_of_guests)
        order_table = self._get_order_table(order_table_id)
        if order_table.empty:
            raise IllegalTableState(f"Order table {order_table.id} is empty")

        order_table.number_of_guests = number_of_guests
        self.order_table_repository.save(order_table)
        return order_table

    def find_all(self):
        return self.order_table_repository.find_all()

    def _get_order_table(self, order_table_id):
        order_table = self.order_table_repository.find_by_id(order_table_id)
        if order_table is None:
            raise NotFound(f"Order table not found: {order_table_id}")
        return order_table
