from .review_serializers import ReviewSerializer, ReviewCreateSerializer, CommentCreateSerializer

__all__ = [
    'ReviewSerializer',
    'ReviewCreateSerializer',
    'CommentCreateSerializer',
]
