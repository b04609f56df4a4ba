"""
Product services module.
"""
from .inventory_service import InventoryService, StockLine
from .product_service import ProductService
from .feature_service import ProductFeatureService

__all__ = [
    'InventoryService',
    'StockLine',
    'ProductService',
    'ProductFeatureService',
]
