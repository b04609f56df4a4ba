"""
Product and category serializers.
"""
from decimal import Decimal

from rest_framework import serializers

from ..models import Category, Favorite, Product, ViewedProduct


class CategorySerializer(serializers.ModelSerializer):
    product_count = serializers.IntegerField(source='products.count', read_only=True)

    class Meta:
        model = Category
        fields = ['id', 'name', 'description', 'product_count', 'created_at']
        read_only_fields = ['id', 'product_count', 'created_at']


class ProductSerializer(serializers.ModelSerializer):
    """Read representation used by list and detail endpoints"""
    category = CategorySerializer(read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description', 'price', 'category', 'image',
            'stock_quantity', 'purchase_count', 'comment_count',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.ModelSerializer):
    """Create and update payload for staff"""
    category = serializers.PrimaryKeyRelatedField(queryset=Category.objects.all())
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'))
    stock_quantity = serializers.IntegerField(min_value=0, required=False, default=0)

    class Meta:
        model = Product
        fields = ['name', 'description', 'price', 'category', 'image', 'stock_quantity']


class FavoriteSerializer(serializers.ModelSerializer):
    product = ProductSerializer(read_only=True)

    class Meta:
        model = Favorite
        fields = ['id', 'product', 'created_at']


class ViewedProductSerializer(serializers.ModelSerializer):
    product = ProductSerializer(read_only=True)

    class Meta:
        model = ViewedProduct
        fields = ['id', 'product', 'viewed_at']
