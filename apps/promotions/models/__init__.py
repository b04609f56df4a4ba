"""
Promotion models module.
"""
from .promotion import Promotion

__all__ = [
    'Promotion',
]
