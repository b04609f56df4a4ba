"""
Product service for catalog create, update and delete operations.
"""
from django.db import transaction
from django.db.models import ProtectedError

from apps.common.exceptions import NotFound, ResourceInUse
from ..models import Category, Product


class ProductService:
    """Service for catalog operations"""

    @staticmethod
    def get_product(product_id):
        try:
            return Product.objects.select_related('category').get(pk=product_id)
        except Product.DoesNotExist:
            raise NotFound(f'Product {product_id} not found')

    @staticmethod
    def list_products(keyword='', category_id=None):
        products = Product.objects.select_related('category')
        if keyword:
            products = products.filter(name__icontains=keyword)
        if category_id:
            products = products.filter(category_id=category_id)
        return products

    @staticmethod
    def update_product(instance, validated_data):
        """Write only the submitted fields; stock and counters move through InventoryService"""
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save(update_fields=[*validated_data, 'updated_at'])
        return instance

    @staticmethod
    def delete_product(product_id):
        product = ProductService.get_product(product_id)
        try:
            product.delete()
        except ProtectedError:
            raise ResourceInUse(f'Product {product_id} is referenced by orders')
        return product

    @staticmethod
    def get_category(category_id):
        try:
            return Category.objects.get(pk=category_id)
        except Category.DoesNotExist:
            raise NotFound(f'Category {category_id} not found')

    @staticmethod
    @transaction.atomic
    def delete_category(category_id):
        """Delete a category together with its products"""
        category = ProductService.get_category(category_id)
        try:
            category.delete()
        except ProtectedError:
            raise ResourceInUse(f"Category {category_id} has products referenced by orders")
        return category
