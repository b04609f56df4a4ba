"""
Points views module.
"""
from .points_account_views import get_points_balance, get_points_transactions

__all__ = [
    'get_points_balance',
    'get_points_transactions',
]
