"""
Product list and detail views.
"""
from rest_framework import status
from rest_framework.views import APIView

from apps.common.permissions import IsStaffOrReadOnly
from apps.common.utils import success_response, error_response
from ..serializers import ProductSerializer, ProductWriteSerializer
from ..services import ProductService


class ProductListView(APIView):
    """GET /api/products/ lists, POST creates (staff)"""
    permission_classes = [IsStaffOrReadOnly]

    def get(self, request):
        products = ProductService.list_products(
            keyword=request.GET.get('keyword', ''),
            category_id=request.GET.get('category'),
        )
        serializer = ProductSerializer(products, many=True)
        return success_response(serializer.data, 'Products retrieved successfully')

    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid product data', serializer.errors)
        product = serializer.save()
        return success_response(
            ProductSerializer(product).data,
            'Product created successfully',
            status_code=status.HTTP_201_CREATED
        )


class ProductDetailView(APIView):
    """GET /api/products/<id>, PATCH and DELETE for staff"""
    permission_classes = [IsStaffOrReadOnly]

    def get(self, request, product_id):
        product = ProductService.get_product(product_id)
        return success_response(ProductSerializer(product).data, 'Product retrieved successfully')

    def patch(self, request, product_id):
        product = ProductService.get_product(product_id)
        serializer = ProductWriteSerializer(product, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Invalid product data', serializer.errors)
        product = ProductService.update_product(product, serializer.validated_data)
        return success_response(ProductSerializer(product).data, 'Product updated successfully')

    def delete(self, request, product_id):
        product = ProductService.delete_product(product_id)
        return success_response({'id': product_id, 'name': product.name}, 'Product deleted successfully')
