from .cart_serializers import CartSerializer, CartItemSerializer, CartAddSerializer

__all__ = [
    'CartSerializer',
    'CartItemSerializer',
    'CartAddSerializer',
]
