"""
Review models module.
"""
from .review import Review

__all__ = [
    'Review',
]
