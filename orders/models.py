import uuid
from decimal import Decimal

from django.db import models
from django.utils import timezone

from catalog.models import Menu

# Create your models here.

class OrderTable(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    number_of_guests = models.IntegerField(default=0)
    empty = models.BooleanField(default=True)

    def sit(self):
        self.empty = False

    def clear(self):
        self.number_of_guests = 0
        self.empty = True

    def __str__(self):
        return f"Table: {self.name}"

    class Meta:
        verbose_name_plural = "Order tables"
        ordering = ['name']


class OrderType(models.TextChoices):
    DELIVERY = "DELIVERY", "Delivery"
    TAKEOUT = "TAKEOUT", "Takeout"
    EAT_IN = "EAT_IN", "Eat In"


class OrderStatus(models.TextChoices):
    WAITING = "WAITING", "Waiting"
    ACCEPTED = "ACCEPTED", "Accepted"
    SERVED = "SERVED", "Served"
    DELIVERING = "DELIVERING", "Delivering"
    DELIVERED = "DELIVERED", "Delivered"
    COMPLETED = "COMPLETED", "Completed"


class Order(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    type = models.CharField(max_length=20, choices=OrderType.choices)
    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.WAITING)
    order_date_time = models.DateTimeField(default=timezone.now)
    delivery_address = models.CharField(max_length=255, null=True, blank=True)
    order_table = models.ForeignKey(
        OrderTable, on_delete=models.PROTECT, null=True, blank=True, related_name='orders'
    )

    def calculate_total(self):
        """Sum of price snapshot * quantity over the order's line items"""
        total = Decimal('0')
        for item in self.order_line_items.all():
            total += item.price * item.quantity
        return total

    def __str__(self):
        return f"#{self.id} - {self.type} - {self.status}"

    class Meta:
        ordering = ['-order_date_time']


class OrderLineItem(models.Model):
    order = models.ForeignKey(Order, related_name='order_line_items', on_delete=models.CASCADE)
    menu = models.ForeignKey(Menu, on_delete=models.PROTECT, related_name='order_line_items')
    quantity = models.BigIntegerField()
    price = models.DecimalField(max_digits=19, decimal_places=2)

    def __str__(self):
        return f"{self.quantity} x {self.menu.name}"

    class Meta:
        ordering = ['id']
