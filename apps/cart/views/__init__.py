from .cart_views import CartView, CartAddView, CartRemoveView

__all__ = [
    'CartView',
    'CartAddView',
    'CartRemoveView',
]
