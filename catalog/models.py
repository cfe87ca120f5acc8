import uuid

from django.db import models

from common.validators import sum_line_subtotals


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=19, decimal_places=2)

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['name']


class MenuGroup(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['name']


class Menu(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=19, decimal_places=2)
    menu_group = models.ForeignKey(MenuGroup, on_delete=models.PROTECT, related_name='menus')
    displayed = models.BooleanField(default=False)

    def products_total(self, menu_products=None):
        """Sum of quantity * current product price over the menu's products"""
        if menu_products is None:
            menu_products = self.menu_products.select_related('product')
        return sum_line_subtotals(
            (menu_product.product.price, menu_product.quantity)
            for menu_product in menu_products
        )

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['name']


class MenuProduct(models.Model):
    menu = models.ForeignKey(Menu, on_delete=models.CASCADE, related_name='menu_products')
    product = models.ForeignKey(Product, on_delete=models.PROTECT, related_name='menu_products')
    quantity = models.BigIntegerField()

    def __str__(self):
        return f"{self.quantity} x {self.product.name}"

    class Meta:
        ordering = ['id']
