from django.conf import settings
from django.db import models


class Cart(models.Model):
    """One shopping cart per user"""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='cart')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'carts'

    def __str__(self):
        return f"Cart of user {self.user_id}"


class CartItem(models.Model):
    cart = models.ForeignKey('Cart', on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey('products.Product', on_delete=models.CASCADE, related_name='cart_items')
    quantity = models.PositiveIntegerField()
    added_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'cart_items'
        ordering = ['added_at', 'id']
        constraints = [
            models.UniqueConstraint(fields=['cart', 'product'], name='cart_item_unique_product'),
        ]

    def __str__(self):
        return f"{self.quantity} x product {self.product_id}"
