from common.repositories import ModelRepository

from .models import Order, OrderLineItem, OrderTable


class OrderTableRepository(ModelRepository):
    model = OrderTable


class OrderRepository(ModelRepository):
    model = Order

    def get_queryset(self):
        return Order.objects.select_related('order_table').prefetch_related('order_line_items__menu')

    def save(self, order, order_line_items=None):
        order.save()
        if order_line_items:
            for order_line_item in order_line_items:
                order_line_item.order = order
            OrderLineItem.objects.bulk_create(order_line_items)
        return order

    def exists_by_order_table_and_status_not(self, order_table, status):
        return Order.objects.filter(order_table=order_table).exclude(status=status).exists()
