from rest_framework import serializers

from .models import Product, MenuGroup, Menu, MenuProduct
from .services import (
    ProductService, MenuGroupService, MenuService,
    ProductRequest, MenuGroupRequest, MenuRequest, MenuProductRequest
)


class ProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ['id', 'name', 'price']
        read_only_fields = ['id']


class ProductCreateSerializer(serializers.Serializer):
    # Rules live in ProductService; the serializer only shapes the input
    name = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    price = serializers.DecimalField(max_digits=19, decimal_places=2, required=False, allow_null=True)

    def create(self, validated_data):
        return ProductService().create(ProductRequest(**validated_data))


class PriceChangeSerializer(serializers.Serializer):
    price = serializers.DecimalField(max_digits=19, decimal_places=2, required=False, allow_null=True)


class MenuGroupSerializer(serializers.ModelSerializer):
    class Meta:
        model = MenuGroup
        fields = ['id', 'name']
        read_only_fields = ['id']


class MenuGroupCreateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    def create(self, validated_data):
        return MenuGroupService().create(MenuGroupRequest(**validated_data))


class MenuProductSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(read_only=True)
    product_name = serializers.CharField(source='product.name', read_only=True)
    product_price = serializers.DecimalField(source='product.price', max_digits=19, decimal_places=2, read_only=True)

    class Meta:
        model = MenuProduct
        fields = ['id', 'product_id', 'product_name', 'product_price', 'quantity']


class MenuSerializer(serializers.ModelSerializer):
    menu_group_id = serializers.UUIDField(read_only=True)
    menu_group_name = serializers.CharField(source='menu_group.name', read_only=True)
    menu_products = MenuProductSerializer(many=True, read_only=True)

    class Meta:
        model = Menu
        fields = ['id', 'name', 'price', 'menu_group_id', 'menu_group_name', 'displayed', 'menu_products']


class MenuProductCreateSerializer(serializers.Serializer):
    product_id = serializers.UUIDField(required=False, allow_null=True)
    quantity = serializers.IntegerField(required=False, allow_null=True)


class MenuCreateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    price = serializers.DecimalField(max_digits=19, decimal_places=2, required=False, allow_null=True)
    menu_group_id = serializers.UUIDField(required=False, allow_null=True)
    menu_products = MenuProductCreateSerializer(many=True, required=False)
    displayed = serializers.BooleanField(default=False)

    def create(self, validated_data):
        menu_products = [
            MenuProductRequest(**menu_product)
            for menu_product in validated_data.pop('menu_products', [])
        ]
        return MenuService().create(MenuRequest(menu_products=menu_products, **validated_data))
