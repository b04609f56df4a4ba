"""
Product models module.
"""
from .category import Category
from .product import Product
from .favorite import Favorite, ViewedProduct

__all__ = [
    'Category',
    'Product',
    'Favorite',
    'ViewedProduct',
]
