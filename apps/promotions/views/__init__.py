from .promotion_views import (
    list_promotions, quote_discount, AdminPromotionListView, AdminPromotionDetailView
)

__all__ = [
    'list_promotions',
    'quote_discount',
    'AdminPromotionListView',
    'AdminPromotionDetailView',
]
