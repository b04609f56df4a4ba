from django.urls import path
from . import views

urlpatterns = [
    path('', views.CartView.as_view(), name='cart-detail'),
    path('add', views.CartAddView.as_view(), name='cart-add'),
    path('remove/<int:product_id>', views.CartRemoveView.as_view(), name='cart-remove'),
]
