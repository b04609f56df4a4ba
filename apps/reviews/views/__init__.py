from .review_views import ProductReviewView, ProductCommentView, my_reviews

__all__ = [
    'ProductReviewView',
    'ProductCommentView',
    'my_reviews',
]
