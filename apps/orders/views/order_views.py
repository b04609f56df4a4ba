"""
Customer order views: checkout, listing, detail and cancellation.
"""
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.common.exceptions import InvalidShippingInfo
from apps.common.utils import success_response, error_response
from ..serializers import CheckoutSerializer, OrderSerializer, OrderListSerializer
from ..services import OrderService


class CheckoutView(APIView):
    """POST /api/orders/checkout"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = CheckoutSerializer(data=request.data)
        if not serializer.is_valid():
            if 'shipping_info' in serializer.errors:
                raise InvalidShippingInfo('Invalid shipping info', **serializer.errors['shipping_info'])
            return error_response('Invalid checkout data', serializer.errors)

        data = serializer.validated_data
        order = OrderService.create_order(
            request.user,
            payment_method=data['payment_method'],
            shipping_info=data.get('shipping_info'),
            note=data.get('note'),
            promotion_code=data.get('promotion_code') or None,
            points_to_redeem=data.get('points_to_redeem'),
        )
        order = OrderService.get_order(order.id)
        return success_response(
            OrderSerializer(order).data,
            'Order placed successfully',
            status_code=status.HTTP_201_CREATED
        )


class MyOrderListView(APIView):
    """GET /api/orders/?status="""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        orders = OrderService.list_user_orders(request.user, request.GET.get('status'))
        return success_response(OrderListSerializer(orders, many=True).data, 'Orders retrieved successfully')


class OrderDetailView(APIView):
    """GET /api/orders/<id>"""
    permission_classes = [IsAuthenticated]

    def get(self, request, order_id):
        owner = None if request.user.is_staff else request.user
        order = OrderService.get_order(order_id, owner)
        return success_response(OrderSerializer(order).data, 'Order retrieved successfully')


class CancelOrderView(APIView):
    """POST /api/orders/<id>/cancel"""
    permission_classes = [IsAuthenticated]

    def post(self, request, order_id):
        OrderService.request_cancellation(order_id, request.user)
        order = OrderService.get_order(order_id)
        return success_response(OrderSerializer(order).data, f'Order is now {order.status}')
