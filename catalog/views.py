from rest_framework import generics
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import filters
from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema

from common.views import CreateWithServiceMixin

from .repositories import ProductRepository, MenuGroupRepository, MenuRepository
from .serializers import (
    ProductSerializer, ProductCreateSerializer, PriceChangeSerializer,
    MenuGroupSerializer, MenuGroupCreateSerializer,
    MenuSerializer, MenuCreateSerializer
)
from .services import ProductService, MenuService


# Product Views
class ProductListCreateView(CreateWithServiceMixin, generics.ListCreateAPIView):
    """
    get: List all products
    post: Create a new product
    """
    create_serializer_class = ProductCreateSerializer
    read_serializer_class = ProductSerializer
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name']
    ordering_fields = ['name', 'price']

    def get_queryset(self):
        return ProductRepository().get_queryset()

    @swagger_auto_schema(request_body=ProductCreateSerializer, responses={201: ProductSerializer})
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


@swagger_auto_schema(
    method='put',
    operation_description="Change a product price; menus priced above their new value are hidden",
    request_body=PriceChangeSerializer,
    responses={200: ProductSerializer, 400: 'Invalid price', 404: 'Product not found'}
)
@api_view(['PUT'])
def change_product_price(request, pk):
    serializer = PriceChangeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    product = ProductService().change_price(pk, serializer.validated_data.get('price'))
    return Response(ProductSerializer(product).data)


# Menu Group Views
class MenuGroupListCreateView(CreateWithServiceMixin, generics.ListCreateAPIView):
    """
    get: List all menu groups
    post: Create a new menu group
    """
    create_serializer_class = MenuGroupCreateSerializer
    read_serializer_class = MenuGroupSerializer

    def get_queryset(self):
        return MenuGroupRepository().get_queryset()

    @swagger_auto_schema(request_body=MenuGroupCreateSerializer, responses={201: MenuGroupSerializer})
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


# Menu Views
class MenuListCreateView(CreateWithServiceMixin, generics.ListCreateAPIView):
    """
    get: List all menus
    post: Create a new menu from existing products
    """
    create_serializer_class = MenuCreateSerializer
    read_serializer_class = MenuSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['displayed', 'menu_group']
    search_fields = ['name']
    ordering_fields = ['name', 'price']

    def get_queryset(self):
        return MenuRepository().get_queryset()

    @swagger_auto_schema(
        request_body=MenuCreateSerializer,
        responses={201: MenuSerializer, 400: 'Bad Request', 404: 'Menu group or product not found'}
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)


@swagger_auto_schema(
    method='put',
    operation_description="Change a menu price; it may not exceed the sum of its products",
    request_body=PriceChangeSerializer,
    responses={200: MenuSerializer, 400: 'Invalid price', 404: 'Menu not found'}
)
@api_view(['PUT'])
def change_menu_price(request, pk):
    serializer = PriceChangeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    menu = MenuService().change_price(pk, serializer.validated_data.get('price'))
    return Response(MenuSerializer(menu).data)


@swagger_auto_schema(method='put', responses={200: MenuSerializer, 400: 'Price exceeds value', 404: 'Menu not found'})
@api_view(['PUT'])
def display_menu(request, pk):
    menu = MenuService().display(pk)
    return Response(MenuSerializer(menu).data)


@swagger_auto_schema(method='put', responses={200: MenuSerializer, 404: 'Menu not found'})
@api_view(['PUT'])
def hide_menu(request, pk):
    menu = MenuService().hide(pk)
    return Response(MenuSerializer(menu).data)
