"""
Cart views.
"""
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.common.exceptions import NotFound
from apps.common.utils import success_response, error_response
from ..serializers import CartSerializer, CartAddSerializer
from ..services import CartService


class CartView(APIView):
    """GET /api/cart/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        cart = CartService.find_cart_for_user(request.user)
        if cart is None:
            return error_response('Cart not found', status_code=status.HTTP_404_NOT_FOUND, kind=NotFound.kind)
        return success_response(CartSerializer(cart).data, 'Cart retrieved successfully')


class CartAddView(APIView):
    """POST /api/cart/add"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = CartAddSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid cart data', serializer.errors)

        data = serializer.validated_data
        CartService.add_item(request.user, data['product_id'], data['quantity'])
        cart = CartService.find_cart_for_user(request.user)
        return success_response(CartSerializer(cart).data, 'Item added to cart', status_code=status.HTTP_201_CREATED)


class CartRemoveView(APIView):
    """DELETE /api/cart/remove/<product_id>"""
    permission_classes = [IsAuthenticated]

    def delete(self, request, product_id):
        CartService.remove_item(request.user, product_id)
        cart = CartService.find_cart_for_user(request.user)
        return success_response(CartSerializer(cart).data, 'Item removed from cart')
