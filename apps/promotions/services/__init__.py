"""
Promotion services module.
"""
from .promotion_service import PromotionService
from .discount_resolver import DiscountResolver, DiscountQuote

__all__ = [
    'PromotionService',
    'DiscountResolver',
    'DiscountQuote',
]
