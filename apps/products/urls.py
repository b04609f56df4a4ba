from django.urls import path
from . import views

urlpatterns = [
    path('categories/', views.CategoryListView.as_view(), name='category-list'),
    path('categories/<int:category_id>', views.CategoryDetailView.as_view(), name='category-detail'),
    path('favorites/', views.FavoriteListView.as_view(), name='favorite-list'),
    path('favorites/<int:product_id>', views.FavoriteView.as_view(), name='favorite-detail'),
    path('viewed/', views.RecentlyViewedListView.as_view(), name='viewed-list'),
    path('viewed/<int:product_id>', views.RecordViewView.as_view(), name='viewed-record'),
    path('<int:product_id>/similar', views.SimilarProductsView.as_view(), name='product-similar'),
    path('<int:product_id>/stats', views.ProductStatsView.as_view(), name='product-stats'),
    path('<int:product_id>', views.ProductDetailView.as_view(), name='product-detail'),
    path('', views.ProductListView.as_view(), name='product-list'),
]
