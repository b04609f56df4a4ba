"""
Favorites, recently viewed, similar products and product statistics.
"""
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from apps.common.exceptions import NotFound
from apps.common.utils import success_response, error_response
from ..serializers import FavoriteSerializer, ProductSerializer, ViewedProductSerializer
from ..services import ProductFeatureService


class FavoriteListView(APIView):
    """GET /api/products/favorites/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        favorites = ProductFeatureService.list_favorites(request.user)
        return success_response(FavoriteSerializer(favorites, many=True).data, 'Favorites retrieved successfully')


class FavoriteView(APIView):
    """POST adds, DELETE removes /api/products/favorites/<product_id>"""
    permission_classes = [IsAuthenticated]

    def post(self, request, product_id):
        favorite, created = ProductFeatureService.add_favorite(request.user, product_id)
        return success_response(
            FavoriteSerializer(favorite).data,
            'Added to favorites' if created else 'Already in favorites',
            status_code=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )

    def delete(self, request, product_id):
        if not ProductFeatureService.remove_favorite(request.user, product_id):
            return error_response(
                'Product is not in favorites', status_code=status.HTTP_404_NOT_FOUND, kind=NotFound.kind
            )
        return success_response({'product_id': product_id}, 'Removed from favorites')


class RecentlyViewedListView(APIView):
    """GET /api/products/viewed/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        viewed = ProductFeatureService.list_recently_viewed(request.user)
        return success_response(ViewedProductSerializer(viewed, many=True).data, 'Viewed products retrieved successfully')


class RecordViewView(APIView):
    """POST /api/products/viewed/<product_id>"""
    permission_classes = [IsAuthenticated]

    def post(self, request, product_id):
        viewed = ProductFeatureService.record_view(request.user, product_id)
        return success_response(ViewedProductSerializer(viewed).data, 'Product view recorded')


class SimilarProductsView(APIView):
    """GET /api/products/<id>/similar"""
    permission_classes = [AllowAny]

    def get(self, request, product_id):
        products = ProductFeatureService.similar_products(product_id)
        return success_response(ProductSerializer(products, many=True).data, 'Similar products retrieved successfully')


class ProductStatsView(APIView):
    """GET /api/products/<id>/stats"""
    permission_classes = [AllowAny]

    def get(self, request, product_id):
        return success_response(ProductFeatureService.product_stats(product_id), 'Product stats retrieved successfully')
