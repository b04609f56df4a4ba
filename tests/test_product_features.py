"""
Favorites, recently viewed, similar products and product stats.
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.common.exceptions import NotFound
from apps.products.models import Favorite, Product, ViewedProduct
from apps.products.services import ProductFeatureService
from apps.reviews.models import Review
from tests.factories import UserFactory, CategoryFactory, ProductFactory

pytestmark = pytest.mark.django_db


class TestFavorites:

    def test_add_list_remove(self, user, sample_product):
        favorite, created = ProductFeatureService.add_favorite(user, sample_product.pk)
        assert created

        assert [f.product_id for f in ProductFeatureService.list_favorites(user)] == [sample_product.pk]
        assert ProductFeatureService.remove_favorite(user, sample_product.pk)
        assert not Favorite.objects.filter(user=user).exists()

    def test_adding_twice_keeps_one_row(self, user, sample_product):
        ProductFeatureService.add_favorite(user, sample_product.pk)
        _, created = ProductFeatureService.add_favorite(user, sample_product.pk)

        assert not created
        assert Favorite.objects.filter(user=user).count() == 1

    def test_unknown_product(self, user):
        with pytest.raises(NotFound):
            ProductFeatureService.add_favorite(user, 999999)

    def test_remove_missing_favorite(self, user, sample_product):
        assert not ProductFeatureService.remove_favorite(user, sample_product.pk)

    def test_api(self, auth_client, sample_product):
        response = auth_client.post(f'/api/products/favorites/{sample_product.pk}')
        assert response.status_code == 201
        assert auth_client.post(f'/api/products/favorites/{sample_product.pk}').status_code == 200

        response = auth_client.get('/api/products/favorites/')
        assert [f['product']['id'] for f in response.data['data']] == [sample_product.pk]

        assert auth_client.delete(f'/api/products/favorites/{sample_product.pk}').status_code == 200
        response = auth_client.delete(f'/api/products/favorites/{sample_product.pk}')
        assert response.status_code == 404
        assert response.data['kind'] == 'NotFound'

    def test_requires_login(self, api_client):
        assert api_client.get('/api/products/favorites/').status_code == 401


class TestRecentlyViewed:

    def test_view_is_upserted(self, user, sample_product):
        first = ProductFeatureService.record_view(user, sample_product.pk)
        second = ProductFeatureService.record_view(user, sample_product.pk)

        assert first.pk == second.pk
        assert ViewedProduct.objects.filter(user=user).count() == 1

    def test_newest_ten_first(self, user):
        products = [ProductFactory() for _ in range(12)]
        now = timezone.now()
        for minutes_ago, product in enumerate(products):
            ViewedProduct.objects.create(user=user, product=product, viewed_at=now - timedelta(minutes=minutes_ago + 1))

        ProductFeatureService.record_view(user, products[-1].pk)
        viewed = list(ProductFeatureService.list_recently_viewed(user))

        assert len(viewed) == 10
        assert viewed[0].product_id == products[-1].pk
        assert [v.product_id for v in viewed[1:]] == [p.pk for p in products[:9]]

    def test_views_are_per_user(self, user, sample_product):
        ProductFeatureService.record_view(UserFactory(), sample_product.pk)
        assert list(ProductFeatureService.list_recently_viewed(user)) == []

    def test_api(self, auth_client, sample_product):
        assert auth_client.post(f'/api/products/viewed/{sample_product.pk}').status_code == 200
        assert auth_client.post('/api/products/viewed/999999').status_code == 404

        response = auth_client.get('/api/products/viewed/')
        assert [v['product']['id'] for v in response.data['data']] == [sample_product.pk]


class TestSimilarProducts:

    def test_same_category_without_itself(self):
        category = CategoryFactory()
        product = ProductFactory(category=category)
        siblings = [ProductFactory(category=category) for _ in range(7)]
        ProductFactory()

        similar = list(ProductFeatureService.similar_products(product.pk))

        assert len(similar) == 5
        assert product not in similar
        assert all(p.category_id == category.pk for p in similar)
        assert set(similar) <= set(siblings)

    def test_api_is_public(self, api_client, sample_product):
        response = api_client.get(f'/api/products/{sample_product.pk}/similar')
        assert response.status_code == 200
        assert response.data['data'] == []

        assert api_client.get('/api/products/999999/similar').status_code == 404


class TestProductStats:

    def test_reports_counters_and_ratings(self, sample_product):
        buyer, other = UserFactory(), UserFactory()
        Review.objects.create(user=buyer, product=sample_product, rating=5)
        Review.objects.create(user=other, product=sample_product, rating=4)
        Review.objects.create(user=other, product=sample_product, comment='Looks nice')
        ProductFeatureService.add_favorite(buyer, sample_product.pk)
        Product.objects.filter(pk=sample_product.pk).update(purchase_count=6, comment_count=3)

        stats = ProductFeatureService.product_stats(sample_product.pk)

        assert stats == {
            'product_id': sample_product.pk,
            'purchase_count': 6,
            'comment_count': 3,
            'favorite_count': 1,
            'review_count': 2,
            'average_rating': 4.5,
        }

    def test_no_reviews(self, api_client, sample_product):
        response = api_client.get(f'/api/products/{sample_product.pk}/stats')

        assert response.status_code == 200
        assert response.data['data']['average_rating'] is None
        assert response.data['data']['review_count'] == 0
