from django.db import models
from django.conf import settings


class Notification(models.Model):
    """Per-user notification written by the notification sink"""

    CATEGORY_ORDER = 'order'
    CATEGORY_PROMOTION = 'promotion'
    CATEGORY_REVIEW = 'review'
    CATEGORY_SYSTEM = 'system'

    CATEGORY_CHOICES = [
        (CATEGORY_ORDER, 'Order'),
        (CATEGORY_PROMOTION, 'Promotion'),
        (CATEGORY_REVIEW, 'Review'),
        (CATEGORY_SYSTEM, 'System'),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notifications'
    )
    message = models.TextField()
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default=CATEGORY_SYSTEM)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notifications'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', 'created_at']),
        ]

    def __str__(self):
        return f"{self.category}: {self.message[:40]}"
