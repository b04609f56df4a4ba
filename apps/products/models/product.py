from django.db import models


class Product(models.Model):
    """Catalog product with its live stock count"""
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='', max_length=1000)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    category = models.ForeignKey('Category', on_delete=models.CASCADE, related_name='products')
    image = models.URLField(max_length=500, blank=True, default='', help_text="Image URL stored in cloud storage")

    # Inventory and engagement counters
    stock_quantity = models.PositiveIntegerField(default=0, help_text="Units available for sale")
    purchase_count = models.PositiveIntegerField(default=0, help_text="Units sold")
    comment_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['category']),
            models.Index(fields=['created_at']),
        ]

    def __str__(self):
        return f"{self.name} (id: {self.id})"

    @property
    def in_stock(self):
        return self.stock_quantity > 0
