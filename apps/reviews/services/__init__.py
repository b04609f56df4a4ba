"""
Review services module.
"""
from .review_service import ReviewService

__all__ = [
    'ReviewService',
]
