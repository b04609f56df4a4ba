"""
Order serializers module.
"""
from .order_serializers import (
    OrderItemSerializer, OrderStatusHistorySerializer, OrderSerializer,
    OrderListSerializer, ShippingInfoSerializer, CheckoutSerializer,
    OrderStatusUpdateSerializer
)

__all__ = [
    'OrderItemSerializer',
    'OrderStatusHistorySerializer',
    'OrderSerializer',
    'OrderListSerializer',
    'ShippingInfoSerializer',
    'CheckoutSerializer',
    'OrderStatusUpdateSerializer',
]
