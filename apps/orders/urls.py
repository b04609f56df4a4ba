from django.urls import path
from . import views

urlpatterns = [
    path('checkout', views.CheckoutView.as_view(), name='order-checkout'),
    path('admin/', views.AdminOrderListView.as_view(), name='admin-order-list'),
    path('admin/<int:order_id>/status', views.AdminOrderStatusView.as_view(), name='admin-order-status'),
    path('<int:order_id>/cancel', views.CancelOrderView.as_view(), name='order-cancel'),
    path('<int:order_id>', views.OrderDetailView.as_view(), name='order-detail'),
    path('', views.MyOrderListView.as_view(), name='order-list'),
]
