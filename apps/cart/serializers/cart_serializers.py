"""
Cart serializers.
"""
from rest_framework import serializers

from ..models import Cart, CartItem


class CartItemSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    price = serializers.DecimalField(source='product.price', max_digits=10, decimal_places=2, read_only=True)
    stock_quantity = serializers.IntegerField(source='product.stock_quantity', read_only=True)

    class Meta:
        model = CartItem
        fields = ['product', 'product_name', 'price', 'stock_quantity', 'quantity', 'added_at']
        read_only_fields = fields


class CartSerializer(serializers.ModelSerializer):
    items = CartItemSerializer(many=True, read_only=True)
    total = serializers.SerializerMethodField()

    class Meta:
        model = Cart
        fields = ['id', 'items', 'total', 'updated_at']
        read_only_fields = fields

    def get_total(self, obj):
        total = sum(item.product.price * item.quantity for item in obj.items.all())
        return str(total)


class CartAddSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1, default=1)
