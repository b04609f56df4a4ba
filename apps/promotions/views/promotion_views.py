"""
Promotion views.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.views import APIView

from apps.cart.services import CartService
from apps.common.utils import success_response, error_response
from ..models import Promotion
from ..serializers import (
    PromotionSerializer, PromotionCreateSerializer, DiscountQuoteRequestSerializer
)
from ..services import DiscountResolver, PromotionService


@api_view(['GET'])
@permission_classes([AllowAny])
def list_promotions(request):
    """Active promotions: global ones plus the caller's own coupons"""
    promotions = PromotionService.list_active(request.user)
    return success_response(PromotionSerializer(promotions, many=True).data, 'Promotions retrieved successfully')


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def quote_discount(request):
    """Preview the discount on the current cart without consuming anything"""
    serializer = DiscountQuoteRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid discount request', serializer.errors)

    lines = CartService.snapshot(request.user)
    order_total = sum((line.line_total for line in lines), start=0)
    quote = DiscountResolver.quote(
        order_total,
        request.user.id,
        promotion_code=serializer.validated_data.get('promotion_code'),
        points_to_redeem=serializer.validated_data.get('points_to_redeem'),
    )
    return success_response(quote.as_dict(), 'Discount calculated')


class AdminPromotionListView(APIView):
    """Staff listing and creation of promotions"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        promotions = Promotion.objects.select_related('user').all()
        return success_response(PromotionSerializer(promotions, many=True).data, 'Promotions retrieved successfully')

    def post(self, request):
        serializer = PromotionCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid promotion data', serializer.errors)
        promotion = PromotionService.create(**serializer.validated_data)
        return success_response(
            PromotionSerializer(promotion).data,
            'Promotion created successfully',
            status_code=status.HTTP_201_CREATED
        )


class AdminPromotionDetailView(APIView):
    permission_classes = [IsAdminUser]

    def delete(self, request, promotion_id):
        PromotionService.delete(promotion_id)
        return success_response({'id': promotion_id}, 'Promotion deleted successfully')
