from .promotion_serializers import (
    PromotionSerializer, PromotionCreateSerializer, DiscountQuoteRequestSerializer
)

__all__ = [
    'PromotionSerializer',
    'PromotionCreateSerializer',
    'DiscountQuoteRequestSerializer',
]
