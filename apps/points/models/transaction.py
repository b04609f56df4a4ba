from django.conf import settings
from django.db import models


class PointsTransaction(models.Model):
    """Append-only record of every change to a user's points balance"""
    TYPE_EARNING = 'earning'
    TYPE_REDEMPTION = 'redemption'
    TYPE_ADJUSTMENT = 'adjustment'
    TYPE_REFUND = 'refund'

    TRANSACTION_TYPES = [
        (TYPE_EARNING, 'Points Earned'),
        (TYPE_REDEMPTION, 'Points Redeemed'),
        (TYPE_ADJUSTMENT, 'Manual Adjustment'),
        (TYPE_REFUND, 'Refund'),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='points_transactions')
    transaction_type = models.CharField(max_length=20, choices=TRANSACTION_TYPES)
    amount = models.IntegerField()  # Positive for earning, negative for spending
    balance_after = models.IntegerField()
    description = models.CharField(max_length=200, blank=True)
    reference_id = models.CharField(max_length=100, blank=True, null=True)  # Order number, review id, etc.
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'points_transactions'
        ordering = ['-created_at', '-id']
        verbose_name = 'Points Transaction'
        verbose_name_plural = 'Points Transactions'

    def __str__(self):
        return f"{self.user_id} - {self.amount} points ({self.get_transaction_type_display()})"

    @property
    def is_earning(self):
        return self.amount > 0

    @property
    def is_spending(self):
        return self.amount < 0
