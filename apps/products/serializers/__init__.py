"""
Product serializers module.
"""
from .product_serializers import (
    CategorySerializer, ProductSerializer, ProductWriteSerializer,
    FavoriteSerializer, ViewedProductSerializer
)

__all__ = [
    'CategorySerializer',
    'ProductSerializer',
    'ProductWriteSerializer',
    'FavoriteSerializer',
    'ViewedProductSerializer',
]
