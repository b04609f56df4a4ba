"""
Cart services module.
"""
from .cart_service import CartService, CartLine

__all__ = [
    'CartService',
    'CartLine',
]
