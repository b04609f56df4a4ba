from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models import Q


class Review(models.Model):
    """
    Product feedback. With a rating it is a review (one per user and product,
    purchase required); without one it is a plain comment.
    """
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews')
    product = models.ForeignKey('products.Product', on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    comment = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'reviews'
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'product'],
                condition=Q(rating__isnull=False),
                name='unique_rated_review_per_user_product',
            ),
        ]

    def __str__(self):
        return f"{self.user} on {self.product}: {self.rating or 'comment'}"

    @property
    def is_rated(self):
        return self.rating is not None
