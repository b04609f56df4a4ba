"""
Points transaction serializers.
"""
from rest_framework import serializers
from ..models import PointsTransaction


class PointsTransactionSerializer(serializers.ModelSerializer):
    """
    Serializer for points transaction list view.
    Used for: GET /api/points/transactions
    """
    transaction_type_display = serializers.CharField(source='get_transaction_type_display', read_only=True)

    class Meta:
        model = PointsTransaction
        fields = [
            'id', 'transaction_type', 'transaction_type_display', 'amount',
            'balance_after', 'description', 'reference_id', 'created_at'
        ]
        read_only_fields = fields
