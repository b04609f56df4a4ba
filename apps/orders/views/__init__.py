"""
Order views module.
"""
from .order_views import CheckoutView, MyOrderListView, OrderDetailView, CancelOrderView
from .admin_order_views import AdminOrderListView, AdminOrderStatusView

__all__ = [
    'CheckoutView',
    'MyOrderListView',
    'OrderDetailView',
    'CancelOrderView',
    'AdminOrderListView',
    'AdminOrderStatusView',
]
