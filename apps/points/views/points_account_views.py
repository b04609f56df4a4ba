"""
Points balance and history views.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..serializers import PointsTransactionSerializer
from ..services import PointsService


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_balance(request):
    """Get user's current points balance"""
    points = PointsService.get_points(request.user.id)
    return success_response({'points': points}, 'Points balance retrieved successfully')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_transactions(request):
    """Get user's points transaction history"""
    page = max(int(request.GET.get('page', 1)), 1)
    page_size = min(max(int(request.GET.get('page_size', 20)), 1), 100)

    transactions = PointsService.get_transactions(request.user, request.GET.get('type'))

    start = (page - 1) * page_size
    end = start + page_size
    serializer = PointsTransactionSerializer(transactions[start:end], many=True)

    return success_response({
        'list': serializer.data,
        'page': page,
        'page_size': page_size,
        'total': transactions.count(),
    }, 'Points transactions retrieved successfully')
