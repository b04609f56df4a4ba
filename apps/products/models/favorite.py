from django.conf import settings
from django.db import models


class Favorite(models.Model):
    """Product a user marked as a favorite"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='favorites')
    product = models.ForeignKey('Product', on_delete=models.CASCADE, related_name='favorited_by')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'product_favorites'
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'product'], name='favorite_unique_user_product'),
        ]

    def __str__(self):
        return f"User {self.user_id} likes product {self.product_id}"


class ViewedProduct(models.Model):
    """Last time a user opened a product; one row per user and product"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='viewed_products')
    product = models.ForeignKey('Product', on_delete=models.CASCADE, related_name='viewed_by')
    viewed_at = models.DateTimeField()

    class Meta:
        db_table = 'product_views'
        ordering = ['-viewed_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'product'], name='viewed_product_unique_user_product'),
        ]
        indexes = [
            models.Index(fields=['user', 'viewed_at']),
        ]

    def __str__(self):
        return f"User {self.user_id} viewed product {self.product_id}"
