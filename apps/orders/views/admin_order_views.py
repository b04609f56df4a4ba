"""
Staff order management views.
"""
from rest_framework.permissions import IsAdminUser
from rest_framework.views import APIView

from apps.common.utils import success_response, error_response
from ..serializers import OrderSerializer, OrderListSerializer, OrderStatusUpdateSerializer
from ..services import OrderService


class AdminOrderListView(APIView):
    """GET /api/orders/admin/?status=&user="""
    permission_classes = [IsAdminUser]

    def get(self, request):
        user_id = request.GET.get('user')
        if user_id and not user_id.isdigit():
            return error_response('Invalid user id', {'user': ['Must be an integer']})

        orders = OrderService.list_orders(request.GET.get('status'), int(user_id) if user_id else None)
        return success_response(OrderListSerializer(orders, many=True).data, 'Orders retrieved successfully')


class AdminOrderStatusView(APIView):
    """PUT /api/orders/admin/<id>/status"""
    permission_classes = [IsAdminUser]

    def put(self, request, order_id):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid status data', serializer.errors)

        OrderService.admin_set_status(
            order_id,
            serializer.validated_data['status'],
            serializer.validated_data.get('note') or None,
        )
        order = OrderService.get_order(order_id)
        return success_response(OrderSerializer(order).data, f'Order status updated to {order.status}')
