from decimal import Decimal

from django.conf import settings
from django.db import models


class Order(models.Model):
    """Customer order and its lifecycle state"""

    STATUS_NEW = 'NEW'
    STATUS_CONFIRMED = 'CONFIRMED'
    STATUS_PREPARING = 'PREPARING'
    STATUS_DELIVERING = 'DELIVERING'
    STATUS_DELIVERED = 'DELIVERED'
    STATUS_CANCEL_REQUESTED = 'CANCELREQUESTED'
    STATUS_CANCELED = 'CANCELED'

    STATUS_CHOICES = [
        (STATUS_NEW, 'New'),
        (STATUS_CONFIRMED, 'Confirmed'),
        (STATUS_PREPARING, 'Preparing'),
        (STATUS_DELIVERING, 'Delivering'),
        (STATUS_DELIVERED, 'Delivered'),
        (STATUS_CANCEL_REQUESTED, 'Cancel Requested'),
        (STATUS_CANCELED, 'Canceled'),
    ]

    TERMINAL_STATUSES = (STATUS_DELIVERED, STATUS_CANCELED)

    PAYMENT_COD = 'COD'
    PAYMENT_WALLET = 'WALLET'

    PAYMENT_CHOICES = [
        (PAYMENT_COD, 'Cash on Delivery'),
        (PAYMENT_WALLET, 'Wallet'),
    ]

    order_number = models.CharField(max_length=32, unique=True)
    # Orders are kept for audit; accounts with orders cannot be deleted
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='orders')

    # Amounts; total_amount is what the customer pays
    subtotal_amount = models.DecimalField(max_digits=10, decimal_places=2)
    discount_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    total_amount = models.DecimalField(max_digits=10, decimal_places=2)
    applied_code = models.CharField(max_length=50, null=True, blank=True)
    points_redeemed = models.PositiveIntegerField(default=0)

    payment_method = models.CharField(max_length=10, choices=PAYMENT_CHOICES)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_NEW)

    # Shipping contact
    shipping_name = models.CharField(max_length=100)
    shipping_address = models.CharField(max_length=255)
    shipping_phone = models.CharField(max_length=20)
    shipping_city = models.CharField(max_length=100, blank=True, default='')
    shipping_country = models.CharField(max_length=100, blank=True, default='')

    note = models.TextField(blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    delivered_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', 'status']),
            models.Index(fields=['status', 'created_at']),
        ]

    def __str__(self):
        return f"Order {self.order_number} - {self.status}"

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES


class OrderStatusHistory(models.Model):
    """Append-only record of every status an order has been in"""
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='status_history')
    status = models.CharField(max_length=20, choices=Order.STATUS_CHOICES)
    note = models.CharField(max_length=255, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'order_status_history'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.order.order_number} -> {self.status}"
