"""
Category views.
"""
from rest_framework import status
from rest_framework.views import APIView

from apps.common.permissions import IsStaffOrReadOnly
from apps.common.utils import success_response, error_response
from ..models import Category
from ..serializers import CategorySerializer, ProductSerializer
from ..services import ProductService


class CategoryListView(APIView):
    permission_classes = [IsStaffOrReadOnly]

    def get(self, request):
        serializer = CategorySerializer(Category.objects.all(), many=True)
        return success_response(serializer.data, 'Categories retrieved successfully')

    def post(self, request):
        serializer = CategorySerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid category data', serializer.errors)
        category = serializer.save()
        return success_response(
            CategorySerializer(category).data,
            'Category created successfully',
            status_code=status.HTTP_201_CREATED
        )


class CategoryDetailView(APIView):
    permission_classes = [IsStaffOrReadOnly]

    def get(self, request, category_id):
        category = ProductService.get_category(category_id)
        data = CategorySerializer(category).data
        data['products'] = ProductSerializer(category.products.all(), many=True).data
        return success_response(data, 'Category retrieved successfully')

    def patch(self, request, category_id):
        category = ProductService.get_category(category_id)
        serializer = CategorySerializer(category, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Invalid category data', serializer.errors)
        serializer.save()
        return success_response(serializer.data, 'Category updated successfully')

    def delete(self, request, category_id):
        ProductService.delete_category(category_id)
        return success_response({'id': category_id}, 'Category and associated products deleted successfully')
