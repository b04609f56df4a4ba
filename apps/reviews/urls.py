from django.urls import path
from . import views

urlpatterns = [
    path('mine', views.my_reviews, name='my-reviews'),
    path('comment/<int:product_id>', views.ProductCommentView.as_view(), name='product-comments'),
    path('<int:product_id>', views.ProductReviewView.as_view(), name='product-reviews'),
]
