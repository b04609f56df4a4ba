"""
Common models module.
"""
from .notification import Notification

__all__ = [
    'Notification',
]
