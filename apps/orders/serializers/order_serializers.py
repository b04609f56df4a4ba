from rest_framework import serializers

from ..models import Order, OrderItem, OrderStatusHistory


class OrderItemSerializer(serializers.ModelSerializer):
    """Serializer for order items"""

    class Meta:
        model = OrderItem
        fields = ['id', 'product', 'product_name', 'quantity', 'unit_price', 'line_total']


class OrderStatusHistorySerializer(serializers.ModelSerializer):

    class Meta:
        model = OrderStatusHistory
        fields = ['status', 'note', 'created_at']


class OrderSerializer(serializers.ModelSerializer):
    """Full order with items and status history"""

    items = OrderItemSerializer(many=True, read_only=True)
    status_history = OrderStatusHistorySerializer(many=True, read_only=True)
    shipping_info = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'user', 'status', 'payment_method',
            'subtotal_amount', 'discount_amount', 'total_amount',
            'applied_code', 'points_redeemed', 'shipping_info', 'note',
            'items', 'status_history', 'created_at', 'updated_at', 'delivered_at'
        ]
        read_only_fields = fields

    def get_shipping_info(self, obj):
        return {
            'name': obj.shipping_name,
            'address': obj.shipping_address,
            'phone': obj.shipping_phone,
            'city': obj.shipping_city,
            'country': obj.shipping_country,
        }


class OrderListSerializer(serializers.ModelSerializer):
    """Compact order for list responses"""
    item_count = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'user', 'status', 'payment_method',
            'total_amount', 'item_count', 'created_at', 'delivered_at'
        ]

    def get_item_count(self, obj):
        return sum(item.quantity for item in obj.items.all())


class ShippingInfoSerializer(serializers.Serializer):
    # Required fields are checked by the service so the failure carries its own kind
    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True)
    country = serializers.CharField(max_length=100, required=False, allow_blank=True)


class CheckoutSerializer(serializers.Serializer):
    """Checkout request body"""
    payment_method = serializers.ChoiceField(choices=Order.PAYMENT_CHOICES)
    shipping_info = ShippingInfoSerializer(required=False, default=dict)
    note = serializers.CharField(max_length=500, required=False, allow_blank=True)
    promotion_code = serializers.CharField(max_length=50, required=False, allow_blank=True)
    points_to_redeem = serializers.IntegerField(required=False, min_value=0)


class OrderStatusUpdateSerializer(serializers.Serializer):
    # Not a ChoiceField: unknown values must surface as InvalidStatus
    status = serializers.CharField(max_length=20)
    note = serializers.CharField(max_length=255, required=False, allow_blank=True)
