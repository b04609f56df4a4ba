"""
Cart API tests.
"""
import pytest

from apps.cart.models import CartItem
from apps.cart.services import CartService
from tests.factories import ProductFactory

pytestmark = pytest.mark.django_db


def test_add_merges_quantities(auth_client, user):
    product = ProductFactory(stock_quantity=5)

    auth_client.post('/api/cart/add', {'product_id': product.pk, 'quantity': 2}, format='json')
    response = auth_client.post('/api/cart/add', {'product_id': product.pk, 'quantity': 1}, format='json')

    assert response.status_code == 201
    items = response.data['data']['items']
    assert len(items) == 1
    assert items[0]['quantity'] == 3


def test_add_beyond_stock(auth_client):
    product = ProductFactory(stock_quantity=2)

    response = auth_client.post('/api/cart/add', {'product_id': product.pk, 'quantity': 3}, format='json')

    assert response.status_code == 409
    assert response.data['kind'] == 'OutOfStock'
    assert response.data['errors']['available'] == 2


def test_add_unknown_product(auth_client):
    response = auth_client.post('/api/cart/add', {'product_id': 999999}, format='json')
    assert response.status_code == 404
    assert response.data['kind'] == 'NotFound'


def test_remove_and_view(auth_client, user):
    keep = ProductFactory()
    drop = ProductFactory()
    CartService.add_item(user, keep.pk, 1)
    CartService.add_item(user, drop.pk, 1)

    response = auth_client.delete(f'/api/cart/remove/{drop.pk}')
    assert response.status_code == 200

    response = auth_client.get('/api/cart/')
    assert [item['product'] for item in response.data['data']['items']] == [keep.pk]


def test_snapshot_captures_prices(user):
    product = ProductFactory()
    CartService.add_item(user, product.pk, 2)

    (line,) = CartService.snapshot(user)

    assert line.product_id == product.pk
    assert line.line_total == product.price * 2


def test_clear_cart(user):
    CartService.add_item(user, ProductFactory().pk, 1)
    CartService.clear_cart(user)
    assert not CartItem.objects.filter(cart__user=user).exists()
