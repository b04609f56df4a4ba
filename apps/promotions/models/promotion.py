from decimal import Decimal

from django.conf import settings
from django.db import models
from django.utils import timezone


class Promotion(models.Model):
    """
    Discount code.

    With ``user`` unset the code is global and reusable until it expires.
    With ``user`` set it belongs to that user and is deleted on first use.
    """
    TYPE_PERCENT = 'percent'
    TYPE_FIXED = 'fixed'

    TYPE_CHOICES = [
        (TYPE_PERCENT, 'Percentage'),
        (TYPE_FIXED, 'Fixed Amount'),
    ]

    code = models.CharField(max_length=50, unique=True)
    discount = models.DecimalField(max_digits=10, decimal_places=2, help_text="Percent or currency amount")
    discount_type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    min_order_value = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    expires_at = models.DateTimeField()
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='promotions',
        help_text="Owner of a single-use code; empty for global codes"
    )
    description = models.CharField(max_length=200, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'promotions'
        ordering = ['expires_at', 'id']
        indexes = [
            models.Index(fields=['code', 'expires_at']),
            models.Index(fields=['user']),
        ]

    def __str__(self):
        return self.code

    @property
    def is_single_use(self):
        return self.user_id is not None

    def is_expired(self, now=None):
        return self.expires_at <= (now or timezone.now())
