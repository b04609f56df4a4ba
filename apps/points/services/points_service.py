"""
Points service: the loyalty balance store.

The balance lives on ``User.points``. Every change is a single conditional
UPDATE so two concurrent debits can never take the balance below zero, and
every successful change appends a PointsTransaction.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F

from apps.common.exceptions import InsufficientPoints, NotFound
from ..models import PointsTransaction

logger = logging.getLogger(__name__)


class PointsService:
    """Service for handling points operations"""

    @staticmethod
    def get_points(user_id) -> int:
        User = get_user_model()
        points = User.objects.filter(pk=user_id).values_list('points', flat=True).first()
        if points is None:
            raise NotFound(f'User {user_id} not found')
        return points

    @staticmethod
    @transaction.atomic
    def adjust_points(user_id, delta, transaction_type=PointsTransaction.TYPE_ADJUSTMENT,
                      description='', reference_id=None) -> bool:
        """
        Atomically add ``delta`` (may be negative) to the balance.
        Returns False without changing anything if the result would be negative.
        """
        if delta == 0:
            return True

        User = get_user_model()
        queryset = User.objects.filter(pk=user_id)
        if delta < 0:
            queryset = queryset.filter(points__gte=-delta)

        if not queryset.update(points=F('points') + delta):
            return False

        balance_after = User.objects.filter(pk=user_id).values_list('points', flat=True).get()
        PointsTransaction.objects.create(
            user_id=user_id,
            transaction_type=transaction_type,
            amount=delta,
            balance_after=balance_after,
            description=description,
            reference_id=reference_id,
        )
        logger.info(f"Points {delta:+d} for user {user_id} ({transaction_type}), balance {balance_after}")
        return True

    @staticmethod
    def credit(user_id, amount, description='', reference_id=None,
               transaction_type=PointsTransaction.TYPE_EARNING):
        if amount <= 0:
            raise ValueError("Points amount must be positive")
        if not PointsService.adjust_points(user_id, amount, transaction_type, description, reference_id):
            raise NotFound(f'User {user_id} not found')

    @staticmethod
    def debit(user_id, amount, description='', reference_id=None):
        """Redeem points; raises InsufficientPoints and leaves the balance untouched on failure"""
        if amount <= 0:
            raise ValueError("Redemption amount must be positive")
        ok = PointsService.adjust_points(
            user_id, -amount, PointsTransaction.TYPE_REDEMPTION, description, reference_id
        )
        if not ok:
            raise InsufficientPoints(
                f'Not enough points: requested {amount}',
                requested=amount,
            )

    @staticmethod
    def get_transactions(user, transaction_type=None):
        transactions = PointsTransaction.objects.filter(user=user)
        if transaction_type:
            transactions = transactions.filter(transaction_type=transaction_type)
        return transactions
