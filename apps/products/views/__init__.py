"""
Product views module.
"""
from .product_views import ProductListView, ProductDetailView
from .category_views import CategoryListView, CategoryDetailView
from .feature_views import (
    FavoriteListView, FavoriteView, RecentlyViewedListView, RecordViewView,
    SimilarProductsView, ProductStatsView
)

__all__ = [
    'ProductListView',
    'ProductDetailView',
    'CategoryListView',
    'CategoryDetailView',
    'FavoriteListView',
    'FavoriteView',
    'RecentlyViewedListView',
    'RecordViewView',
    'SimilarProductsView',
    'ProductStatsView',
]
