"""
Promotion serializers.
"""
from decimal import Decimal

from django.utils import timezone
from rest_framework import serializers

from ..models import Promotion


class PromotionSerializer(serializers.ModelSerializer):
    single_use = serializers.BooleanField(source='is_single_use', read_only=True)

    class Meta:
        model = Promotion
        fields = [
            'id', 'code', 'discount', 'discount_type', 'min_order_value',
            'expires_at', 'user', 'single_use', 'description', 'created_at'
        ]
        read_only_fields = fields


class PromotionCreateSerializer(serializers.ModelSerializer):
    """Staff payload for new promotion codes"""
    discount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'))
    min_order_value = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0'), required=False
    )

    class Meta:
        model = Promotion
        fields = ['code', 'discount', 'discount_type', 'min_order_value', 'expires_at', 'user', 'description']

    def validate_code(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Code cannot be empty")
        return value

    def validate_expires_at(self, value):
        if value <= timezone.now():
            raise serializers.ValidationError("Expiration must be in the future")
        return value

    def validate(self, attrs):
        if attrs['discount_type'] == Promotion.TYPE_PERCENT and attrs['discount'] > 100:
            raise serializers.ValidationError({'discount': 'Percentage cannot exceed 100'})
        return attrs


class DiscountQuoteRequestSerializer(serializers.Serializer):
    """Preview of a discount against the caller's current cart"""
    promotion_code = serializers.CharField(required=False, allow_blank=True)
    points_to_redeem = serializers.IntegerField(required=False, min_value=0)
