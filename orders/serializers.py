from rest_framework import serializers

from .models import Order, OrderLineItem, OrderTable
from .services import (
    OrderService, OrderTableService,
    OrderRequest, OrderLineItemRequest, OrderTableRequest
)


class OrderTableSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderTable
        fields = ['id', 'name', 'number_of_guests', 'empty']
        read_only_fields = ['id', 'number_of_guests', 'empty']


class OrderTableCreateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    def create(self, validated_data):
        return OrderTableService().create(OrderTableRequest(**validated_data))


class NumberOfGuestsSerializer(serializers.Serializer):
    number_of_guests = serializers.IntegerField(required=False, allow_null=True)


class OrderLineItemReadSerializer(serializers.ModelSerializer):
    menu_id = serializers.UUIDField(read_only=True)
    menu_name = serializers.CharField(source='menu.name', read_only=True)
    item_total = serializers.SerializerMethodField()

    class Meta:
        model = OrderLineItem
        fields = ['id', 'menu_id', 'menu_name', 'quantity', 'price', 'item_total']

    def get_item_total(self, obj):
        return str(obj.price * obj.quantity)


class OrderReadSerializer(serializers.ModelSerializer):
    order_line_items = OrderLineItemReadSerializer(many=True, read_only=True)
    order_table_id = serializers.UUIDField(read_only=True)
    table_details = OrderTableSerializer(source='order_table', read_only=True)
    total_price = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id', 'type', 'status', 'order_date_time', 'delivery_address',
            'order_table_id', 'table_details', 'order_line_items', 'total_price'
        ]

    def get_total_price(self, obj):
        return str(obj.calculate_total())


class OrderLineItemCreateSerializer(serializers.Serializer):
    menu_id = serializers.UUIDField(required=False, allow_null=True)
    quantity = serializers.IntegerField(required=False, allow_null=True)
    price = serializers.DecimalField(max_digits=19, decimal_places=2, required=False, allow_null=True)


class OrderCreateSerializer(serializers.Serializer):
    # Order rules are enforced by OrderService, not here
    type = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    order_line_items = OrderLineItemCreateSerializer(many=True, required=False, allow_null=True)
    delivery_address = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    order_table_id = serializers.UUIDField(required=False, allow_null=True)

    def create(self, validated_data):
        items_data = validated_data.pop('order_line_items', None) or []
        order_line_items = [OrderLineItemRequest(**item_data) for item_data in items_data]
        return OrderService().create(OrderRequest(order_line_items=order_line_items, **validated_data))
