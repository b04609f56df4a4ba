"""
Shopper-facing catalog features: favorites, recently viewed products,
similar products and per-product statistics.
"""
from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import Avg, Count
from django.utils import timezone

from apps.common.exceptions import NotFound
from ..models import Favorite, Product, ViewedProduct


class ProductFeatureService:
    """Favorites, view history and product insights"""

    @staticmethod
    def _get_product(product_id) -> Product:
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            raise NotFound(f'Product {product_id} not found')
        return product

    @staticmethod
    def add_favorite(user, product_id):
        """Returns (favorite, created); adding twice keeps the first row"""
        product = ProductFeatureService._get_product(product_id)
        try:
            with transaction.atomic():
                return Favorite.objects.get_or_create(user=user, product=product)
        except IntegrityError:
            # Lost a race with a parallel request for the same pair
            return Favorite.objects.get(user=user, product=product), False

    @staticmethod
    def remove_favorite(user, product_id) -> bool:
        deleted, _ = Favorite.objects.filter(user=user, product_id=product_id).delete()
        return deleted > 0

    @staticmethod
    def list_favorites(user):
        return Favorite.objects.filter(user=user).select_related('product__category')

    @staticmethod
    def record_view(user, product_id) -> ViewedProduct:
        product = ProductFeatureService._get_product(product_id)
        viewed, _ = ViewedProduct.objects.update_or_create(
            user=user, product=product, defaults={'viewed_at': timezone.now()}
        )
        return viewed

    @staticmethod
    def list_recently_viewed(user, limit=None):
        limit = limit or settings.RECENTLY_VIEWED_LIMIT
        return (
            ViewedProduct.objects.filter(user=user)
            .select_related('product__category')
            .order_by('-viewed_at', '-id')[:limit]
        )

    @staticmethod
    def similar_products(product_id, limit=None):
        """Other products of the same category"""
        product = ProductFeatureService._get_product(product_id)
        limit = limit or settings.SIMILAR_PRODUCTS_LIMIT
        return (
            Product.objects.filter(category_id=product.category_id)
            .exclude(pk=product.pk)
            .select_related('category')[:limit]
        )

    @staticmethod
    def product_stats(product_id) -> dict:
        """
        Read-only summary. Counters are maintained by the inventory ledger and
        the review service and are reported as stored.
        """
        product = ProductFeatureService._get_product(product_id)
        ratings = product.reviews.filter(rating__isnull=False).aggregate(
            review_count=Count('id'), average_rating=Avg('rating')
        )
        average = ratings['average_rating']
        return {
            'product_id': product.id,
            'purchase_count': product.purchase_count,
            'comment_count': product.comment_count,
            'favorite_count': product.favorited_by.count(),
            'review_count': ratings['review_count'],
            'average_rating': round(average, 2) if average is not None else None,
        }
