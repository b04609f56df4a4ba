from django.urls import path
from . import views

urlpatterns = [
    path('', views.list_promotions, name='promotion-list'),
    path('quote', views.quote_discount, name='promotion-quote'),
    path('admin/', views.AdminPromotionListView.as_view(), name='admin-promotion-list'),
    path('admin/<int:promotion_id>', views.AdminPromotionDetailView.as_view(), name='admin-promotion-detail'),
]
