"""
Points models module.
"""
from .transaction import PointsTransaction

__all__ = [
    'PointsTransaction',
]
