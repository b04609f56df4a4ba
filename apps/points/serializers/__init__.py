"""
Points serializers module.
"""
from .transaction_serializers import PointsTransactionSerializer

__all__ = [
    'PointsTransactionSerializer',
]
