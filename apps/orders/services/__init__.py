"""
Order services module.
"""
from .order_service import OrderService, AUTO_CONFIRM_NOTE

__all__ = [
    'OrderService',
    'AUTO_CONFIRM_NOTE',
]
