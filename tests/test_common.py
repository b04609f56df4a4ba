"""
Health check, error envelope and sweep command tests.
"""
from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.utils import timezone

from apps.common.exceptions import (
    STATUS_BY_KIND, ShopError, OutOfStock, CancellationWindowClosed, custom_exception_handler
)
from apps.common.utils import error_response
from apps.orders.models import Order
from apps.orders.services import OrderService
from tests.factories import ProductFactory, fill_cart, SHIPPING_INFO

pytestmark = pytest.mark.django_db


def test_health_check(client):
    response = client.get('/api/health/')

    assert response.status_code == 200
    assert response.json()['database']['status'] == 'healthy'


def test_error_envelope():
    response = custom_exception_handler(OutOfStock(7, 3, 1, 'Tea'), {})

    assert response.status_code == 409
    assert response.data == {
        'code': 409,
        'kind': 'OutOfStock',
        'msg': 'Not enough stock for Tea: requested 3, available 1',
        'errors': {'product_id': 7, 'requested': 3, 'available': 1},
    }


def test_unmapped_kind_defaults_to_bad_request():
    response = custom_exception_handler(ShopError('Quantity must be greater than 0'), {})
    assert response.status_code == 400
    assert 'errors' not in response.data


def test_serializer_failures_carry_a_kind():
    response = error_response('Invalid cart data', {'quantity': ['Required']})

    assert response.status_code == 400
    assert response.data['kind'] == 'InvalidRequest'
    assert response.data['errors'] == {'quantity': ['Required']}


def test_every_conflict_kind_is_409():
    assert STATUS_BY_KIND[CancellationWindowClosed.kind] == 409
    assert CancellationWindowClosed('NEW', 45.04).details == {'status': 'NEW', 'elapsed_minutes': 45.0}


def test_sweep_command(user):
    fill_cart(user, (ProductFactory(), 1))
    order = OrderService.create_order(user, Order.PAYMENT_COD, SHIPPING_INFO)
    Order.objects.filter(pk=order.pk).update(created_at=timezone.now() - timedelta(minutes=40))
    out = StringIO()

    call_command('sweep_stale_orders', stdout=out)

    order.refresh_from_db()
    assert order.status == Order.STATUS_CONFIRMED
    assert 'Confirmed 1 stale orders' in out.getvalue()
