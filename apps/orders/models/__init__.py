"""
Order models module.
"""
from .order import Order, OrderStatusHistory
from .order_item import OrderItem

__all__ = [
    'Order',
    'OrderItem',
    'OrderStatusHistory',
]
