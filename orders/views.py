from rest_framework import generics
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import filters
from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from common.views import CreateWithServiceMixin

from .repositories import OrderRepository, OrderTableRepository
from .serializers import (
    OrderTableSerializer, OrderTableCreateSerializer, NumberOfGuestsSerializer,
    OrderReadSerializer, OrderCreateSerializer
)
from .services import OrderService, OrderTableService, OrderTableRequest


# Order Tables
class OrderTableListCreateView(CreateWithServiceMixin, generics.ListCreateAPIView):
    """
    get: List all order tables
    post: Create a new, empty order table
    """
    create_serializer_class = OrderTableCreateSerializer
    read_serializer_class = OrderTableSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ['empty']

    def get_queryset(self):
        return OrderTableRepository().get_queryset()

    @swagger_auto_schema(request_body=OrderTableCreateSerializer, responses={201: OrderTableSerializer})
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


@swagger_auto_schema(method='put', responses={200: OrderTableSerializer, 404: 'Order table not found'})
@api_view(['PUT'])
def sit_order_table(request, pk):
    order_table = OrderTableService().sit(pk)
    return Response(OrderTableSerializer(order_table).data)


@swagger_auto_schema(
    method='put',
    operation_description="Clear a table; every order on it must be completed",
    responses={200: OrderTableSerializer, 404: 'Order table not found', 409: 'Open orders exist'}
)
@api_view(['PUT'])
def clear_order_table(request, pk):
    order_table = OrderTableService().clear(pk)
    return Response(OrderTableSerializer(order_table).data)


@swagger_auto_schema(
    method='put',
    request_body=NumberOfGuestsSerializer,
    responses={200: OrderTableSerializer, 400: 'Invalid quantity', 404: 'Order table not found', 409: 'Table is empty'}
)
@api_view(['PUT'])
def change_number_of_guests(request, pk):
    serializer = NumberOfGuestsSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    order_table = OrderTableService().change_number_of_guests(
        pk, OrderTableRequest(number_of_guests=serializer.validated_data.get('number_of_guests'))
    )
    return Response(OrderTableSerializer(order_table).data)


# Orders
class OrderListCreateView(CreateWithServiceMixin, generics.ListCreateAPIView):
    """
    get: List orders, newest first
    post: Create a new order in WAITING status
    """
    create_serializer_class = OrderCreateSerializer
    read_serializer_class = OrderReadSerializer
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ['type', 'status', 'order_table']
    ordering_fields = ['order_date_time']

    def get_queryset(self):
        return OrderRepository().get_queryset()

    @swagger_auto_schema(
        operation_description="Create a new order with line items",
        request_body=OrderCreateSerializer,
        responses={
            201: OrderReadSerializer,
            400: 'Bad Request',
            404: 'Menu or order table not found',
            409: 'Order table is empty'
        }
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


transition_responses = {
    200: OrderReadSerializer,
    404: openapi.Response(description="Order not found"),
    409: openapi.Response(description="Transition not allowed from the current status"),
}


@swagger_auto_schema(method='put', operation_description="WAITING -> ACCEPTED", responses=transition_responses)
@api_view(['PUT'])
def accept_order(request, pk):
    order = OrderService().accept(pk)
    return Response(OrderReadSerializer(order).data)


@swagger_auto_schema(method='put', operation_description="ACCEPTED -> SERVED", responses=transition_responses)
@api_view(['PUT'])
def serve_order(request, pk):
    order = OrderService().serve(pk)
    return Response(OrderReadSerializer(order).data)


@swagger_auto_schema(method='put', operation_description="SERVED -> DELIVERING (delivery only)", responses=transition_responses)
@api_view(['PUT'])
def start_delivery(request, pk):
    order = OrderService().start_delivery(pk)
    return Response(OrderReadSerializer(order).data)


@swagger_auto_schema(method='put', operation_description="DELIVERING -> DELIVERED (delivery only)", responses=transition_responses)
@api_view(['PUT'])
def complete_delivery(request, pk):
    order = OrderService().complete_delivery(pk)
    return Response(OrderReadSerializer(order).data)


@swagger_auto_schema(
    method='put',
    operation_description="SERVED or DELIVERED -> COMPLETED; eat-in orders release their table",
    responses=transition_responses
)
@api_view(['PUT'])
def complete_order(request, pk):
    order = OrderService().complete(pk)
    return Response(OrderReadSerializer(order).data)
