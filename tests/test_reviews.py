"""
Review and comment tests.
"""
import pytest

from apps.orders.models import Order
from apps.orders.services import OrderService
from apps.points.services import PointsService
from apps.products.models import Product
from apps.promotions.models import Promotion
from apps.reviews.models import Review
from tests.factories import ProductFactory, fill_cart, SHIPPING_INFO

pytestmark = pytest.mark.django_db


def deliver(user, product):
    fill_cart(user, (product, 1))
    order = OrderService.create_order(user, Order.PAYMENT_COD, SHIPPING_INFO)
    OrderService.admin_set_status(order.id, Order.STATUS_DELIVERED)
    return order


def coin(monkeypatch, value):
    monkeypatch.setattr('apps.reviews.services.review_service.random.random', lambda: value)


def test_review_needs_delivered_order(auth_client, user):
    product = ProductFactory()
    fill_cart(user, (product, 1))
    OrderService.create_order(user, Order.PAYMENT_COD, SHIPPING_INFO)

    response = auth_client.post(f'/api/reviews/{product.pk}', {'rating': 5}, format='json')

    assert response.status_code == 403
    assert response.data['kind'] == 'ReviewNotAllowed'


def test_review_rewards_points(auth_client, user, monkeypatch, settings):
    settings.REVIEW_REWARD_POINTS = 50
    coin(monkeypatch, 0.9)
    product = ProductFactory()
    deliver(user, product)

    response = auth_client.post(f'/api/reviews/{product.pk}', {'rating': 4, 'comment': 'Nice'}, format='json')

    assert response.status_code == 201
    assert response.data['data']['reward'] == {'type': 'points', 'amount': 50}
    assert PointsService.get_points(user.id) == 50
    assert Product.objects.get(pk=product.pk).comment_count == 1


def test_review_rewards_single_use_coupon(auth_client, user, monkeypatch):
    coin(monkeypatch, 0.1)
    product = ProductFactory()
    deliver(user, product)

    response = auth_client.post(f'/api/reviews/{product.pk}', {'rating': 5}, format='json')

    reward = response.data['data']['reward']
    assert reward['type'] == 'coupon'
    assert reward['code'].startswith('REVIEW')
    coupon = Promotion.objects.get(code=reward['code'])
    assert coupon.user == user
    assert coupon.discount_type == Promotion.TYPE_PERCENT
    assert coupon.discount == 10
    assert PointsService.get_points(user.id) == 0


def test_second_review_is_rejected(auth_client, user, monkeypatch):
    coin(monkeypatch, 0.9)
    product = ProductFactory()
    deliver(user, product)
    auth_client.post(f'/api/reviews/{product.pk}', {'rating': 5}, format='json')

    response = auth_client.post(f'/api/reviews/{product.pk}', {'rating': 1}, format='json')

    assert response.status_code == 409
    assert response.data['kind'] == 'AlreadyReviewed'
    assert PointsService.get_points(user.id) == 50


def test_rating_out_of_range(auth_client):
    response = auth_client.post(f'/api/reviews/{ProductFactory().pk}', {'rating': 6}, format='json')
    assert response.status_code == 400


def test_comment_needs_no_purchase(auth_client, user):
    product = ProductFactory()

    response = auth_client.post(f'/api/reviews/comment/{product.pk}', {'comment': 'Does it come in red?'}, format='json')

    assert response.status_code == 201
    assert Product.objects.get(pk=product.pk).comment_count == 1
    assert Review.objects.get().rating is None


def test_reviews_and_comments_are_listed_apart(api_client, auth_client, user, monkeypatch):
    coin(monkeypatch, 0.9)
    product = ProductFactory()
    deliver(user, product)
    auth_client.post(f'/api/reviews/{product.pk}', {'rating': 3}, format='json')
    auth_client.post(f'/api/reviews/comment/{product.pk}', {'comment': 'Arrived fast'}, format='json')

    reviews = api_client.get(f'/api/reviews/{product.pk}').data['data']
    comments = api_client.get(f'/api/reviews/comment/{product.pk}').data['data']
    mine = auth_client.get('/api/reviews/mine').data['data']

    assert [r['rating'] for r in reviews] == [3]
    assert [c['comment'] for c in comments] == ['Arrived fast']
    assert len(mine) == 2


def test_review_unknown_product(auth_client):
    response = auth_client.post('/api/reviews/999999', {'rating': 5}, format='json')
    assert response.status_code == 404
