"""
Order lifecycle tests: checkout, cancellation window, admin status control,
auto-confirm sweep and timer.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.db.models import ProtectedError
from django.utils import timezone

from apps.cart.models import CartItem
from apps.cart.services import CartService
from apps.common.exceptions import (
    EmptyCart, InvalidShippingInfo, OutOfStock, Forbidden, NotFound,
    CancellationWindowClosed, OrderAlreadyTerminal, InvalidStatus
)
from apps.common.models import Notification
from apps.orders import scheduler
from apps.orders.models import Order, OrderStatusHistory
from apps.orders.services import OrderService, AUTO_CONFIRM_NOTE
from apps.products.models import Product
from tests.factories import UserFactory, ProductFactory, fill_cart, SHIPPING_INFO

pytestmark = pytest.mark.django_db


def place_order(user, *lines, **kwargs):
    fill_cart(user, *lines)
    return OrderService.create_order(user, Order.PAYMENT_COD, SHIPPING_INFO, **kwargs)


def age_order(order, minutes):
    """Pretend the order was placed ``minutes`` ago."""
    Order.objects.filter(pk=order.pk).update(created_at=timezone.now() - timedelta(minutes=minutes))
    order.refresh_from_db()
    return order


def stock_of(product):
    return Product.objects.get(pk=product.pk).stock_quantity


def assert_history_matches_status(order):
    order.refresh_from_db()
    assert order.status_history.last().status == order.status


class TestCheckout:

    def test_creates_new_order_from_cart(self, user):
        apple = ProductFactory(price=Decimal('2.50'), stock_quantity=10)
        pear = ProductFactory(price=Decimal('4.00'), stock_quantity=5)

        order = place_order(user, (apple, 4), (pear, 2), note='Leave at door')

        assert order.status == Order.STATUS_NEW
        assert order.order_number.startswith('ORD')
        assert order.subtotal_amount == Decimal('18.00')
        assert order.total_amount == Decimal('18.00')
        assert order.discount_amount == Decimal('0.00')
        assert order.note == 'Leave at door'
        assert order.shipping_city == 'Testville'
        assert order.items.count() == 2
        assert list(order.status_history.values_list('status', flat=True)) == [Order.STATUS_NEW]
        assert stock_of(apple) == 6
        assert stock_of(pear) == 3
        assert not CartItem.objects.filter(cart__user=user).exists()

    def test_prices_are_captured_at_checkout(self, user):
        product = ProductFactory(price=Decimal('10.00'))
        order = place_order(user, (product, 1))

        Product.objects.filter(pk=product.pk).update(price=Decimal('99.00'))

        item = order.items.get()
        assert item.unit_price == Decimal('10.00')
        assert item.product_name == product.name

    def test_order_numbers_are_unique(self, user):
        product = ProductFactory(stock_quantity=10)
        first = place_order(user, (product, 1))
        second = place_order(user, (product, 1))
        assert first.order_number != second.order_number

    def test_empty_cart(self, user):
        with pytest.raises(EmptyCart):
            OrderService.create_order(user, Order.PAYMENT_COD, SHIPPING_INFO)
        assert not Order.objects.exists()

    @pytest.mark.parametrize('missing', ['name', 'address', 'phone'])
    def test_missing_shipping_field(self, user, missing):
        product = ProductFactory(stock_quantity=3)
        fill_cart(user, (product, 1))
        shipping = {**SHIPPING_INFO, missing: '  '}

        with pytest.raises(InvalidShippingInfo) as excinfo:
            OrderService.create_order(user, Order.PAYMENT_WALLET, shipping)

        assert excinfo.value.details['missing'] == [missing]
        assert not Order.objects.exists()
        assert stock_of(product) == 3

    def test_out_of_stock_rolls_back_every_line(self, user):
        plenty = ProductFactory(stock_quantity=10)
        scarce = ProductFactory(stock_quantity=1)

        with pytest.raises(OutOfStock) as excinfo:
            place_order(user, (plenty, 3), (scarce, 2))

        assert excinfo.value.details == {'product_id': scarce.pk, 'requested': 2, 'available': 1}
        assert stock_of(plenty) == 10
        assert stock_of(scarce) == 1
        assert not Order.objects.exists()
        assert CartItem.objects.filter(cart__user=user).count() == 2

    def test_notifies_and_schedules_after_commit(self, user, monkeypatch, django_capture_on_commit_callbacks):
        scheduled = []
        monkeypatch.setattr('apps.orders.services.order_service.schedule_auto_confirm', scheduled.append)
        product = ProductFactory()

        with django_capture_on_commit_callbacks(execute=True):
            order = place_order(user, (product, 1))

        assert scheduled == [order.id]
        notification = Notification.objects.get(user=user)
        assert order.order_number in notification.message
        assert notification.category == Notification.CATEGORY_ORDER

    def test_failed_checkout_leaves_no_callbacks(self, user, django_capture_on_commit_callbacks):
        product = ProductFactory(stock_quantity=0)

        with django_capture_on_commit_callbacks() as callbacks:
            with pytest.raises(OutOfStock):
                place_order(user, (product, 1))

        assert callbacks == []

    def test_cart_is_locked_before_snapshot(self, user, monkeypatch):
        calls = []
        lock_cart, snapshot = CartService.lock_cart, CartService.snapshot
        monkeypatch.setattr(CartService, 'lock_cart', staticmethod(lambda u: calls.append('lock') or lock_cart(u)))
        monkeypatch.setattr(CartService, 'snapshot', staticmethod(lambda u: calls.append('snapshot') or snapshot(u)))

        place_order(user, (ProductFactory(), 1))

        assert calls == ['lock', 'snapshot']

    def test_repeated_checkout_of_same_cart(self, user):
        product = ProductFactory(stock_quantity=5)
        place_order(user, (product, 2))

        with pytest.raises(EmptyCart):
            OrderService.create_order(user, Order.PAYMENT_COD, SHIPPING_INFO)

        assert Order.objects.filter(user=user).count() == 1
        assert stock_of(product) == 3

    def test_user_with_orders_cannot_be_deleted(self, user):
        order = place_order(user, (ProductFactory(), 1))

        with pytest.raises(ProtectedError):
            user.delete()

        assert Order.objects.filter(pk=order.pk).exists()
        assert OrderStatusHistory.objects.filter(order=order).count() == 1


class TestCustomerCancellation:

    def test_cancel_inside_window_restores_stock(self, user):
        product = ProductFactory(stock_quantity=5)
        order = place_order(user, (product, 3))
        assert stock_of(product) == 2

        order = OrderService.request_cancellation(order.id, user)

        assert order.status == Order.STATUS_CANCELED
        assert stock_of(product) == 5
        assert_history_matches_status(order)
        assert order.status_history.count() == 2

    def test_cancel_at_29_minutes_then_sweep_is_noop(self, user):
        product = ProductFactory(stock_quantity=5)
        order = age_order(place_order(user, (product, 2)), 29)

        OrderService.request_cancellation(order.id, user)
        # The sweep runs once the order would have been stale
        confirmed = OrderService.sweep_stale_orders(now=timezone.now() + timedelta(minutes=10))

        order.refresh_from_db()
        assert confirmed == 0
        assert order.status == Order.STATUS_CANCELED
        assert stock_of(product) == 5
        assert_history_matches_status(order)

    def test_new_order_outside_window(self, user):
        order = age_order(place_order(user, (ProductFactory(), 1)), 31)

        with pytest.raises(CancellationWindowClosed) as excinfo:
            OrderService.request_cancellation(order.id, user)

        assert excinfo.value.details['status'] == Order.STATUS_NEW
        assert excinfo.value.details['elapsed_minutes'] >= 31
        order.refresh_from_db()
        assert order.status == Order.STATUS_NEW

    @pytest.mark.parametrize('status', [
        Order.STATUS_CONFIRMED, Order.STATUS_DELIVERING, Order.STATUS_DELIVERED,
        Order.STATUS_CANCEL_REQUESTED, Order.STATUS_CANCELED,
    ])
    def test_other_statuses_are_rejected(self, user, status):
        order = place_order(user, (ProductFactory(), 1))
        Order.objects.filter(pk=order.pk).update(status=status)

        with pytest.raises(CancellationWindowClosed):
            OrderService.request_cancellation(order.id, user)

    def test_preparing_becomes_cancel_requested_without_restore(self, user):
        product = ProductFactory(stock_quantity=5)
        order = place_order(user, (product, 2))
        OrderService.admin_set_status(order.id, Order.STATUS_CONFIRMED)
        OrderService.admin_set_status(order.id, Order.STATUS_PREPARING)

        order = OrderService.request_cancellation(order.id, user)
        assert order.status == Order.STATUS_CANCEL_REQUESTED
        assert stock_of(product) == 3
        assert_history_matches_status(order)

        order = OrderService.admin_set_status(order.id, Order.STATUS_CANCELED)
        assert order.status == Order.STATUS_CANCELED
        assert stock_of(product) == 3
        assert_history_matches_status(order)

    def test_only_owner_may_cancel(self, user):
        order = place_order(user, (ProductFactory(), 1))

        with pytest.raises(Forbidden):
            OrderService.request_cancellation(order.id, UserFactory())

    def test_unknown_order(self, user):
        with pytest.raises(NotFound):
            OrderService.request_cancellation(999999, user)


class TestAdminSetStatus:

    def test_walks_through_to_delivered(self, user):
        order = place_order(user, (ProductFactory(), 1))

        for status in (Order.STATUS_CONFIRMED, Order.STATUS_PREPARING,
                       Order.STATUS_DELIVERING, Order.STATUS_DELIVERED):
            order = OrderService.admin_set_status(order.id, status)
            assert_history_matches_status(order)

        assert order.delivered_at is not None
        assert order.status_history.count() == 5

    def test_note_defaults_and_overrides(self, user):
        order = place_order(user, (ProductFactory(), 1))

        OrderService.admin_set_status(order.id, Order.STATUS_CONFIRMED)
        OrderService.admin_set_status(order.id, Order.STATUS_PREPARING, note='Packing now')

        notes = list(order.status_history.values_list('note', flat=True))
        assert notes[1] == 'Status set to CONFIRMED by staff'
        assert notes[2] == 'Packing now'

    def test_status_is_normalized(self, user):
        order = place_order(user, (ProductFactory(), 1))
        order = OrderService.admin_set_status(order.id, ' confirmed ')
        assert order.status == Order.STATUS_CONFIRMED

    def test_unknown_status(self, user):
        order = place_order(user, (ProductFactory(), 1))

        with pytest.raises(InvalidStatus):
            OrderService.admin_set_status(order.id, 'SHIPPED')

        assert order.status_history.count() == 1

    def test_delivered_is_terminal(self, user):
        order = place_order(user, (ProductFactory(), 1))
        order = OrderService.admin_set_status(order.id, Order.STATUS_DELIVERED)
        delivered_at = order.delivered_at

        with pytest.raises(OrderAlreadyTerminal):
            OrderService.admin_set_status(order.id, Order.STATUS_PREPARING)

        order.refresh_from_db()
        assert order.status == Order.STATUS_DELIVERED
        assert order.delivered_at == delivered_at
        assert order.status_history.count() == 2

    def test_canceled_is_terminal(self, user):
        order = place_order(user, (ProductFactory(), 1))
        OrderService.admin_set_status(order.id, Order.STATUS_CANCELED)

        with pytest.raises(OrderAlreadyTerminal):
            OrderService.admin_set_status(order.id, Order.STATUS_NEW)

    def test_admin_cancel_restores_stock(self, user):
        product = ProductFactory(stock_quantity=4)
        order = place_order(user, (product, 4))
        OrderService.admin_set_status(order.id, Order.STATUS_DELIVERING)

        OrderService.admin_set_status(order.id, Order.STATUS_CANCELED)

        assert stock_of(product) == 4
        assert Product.objects.get(pk=product.pk).purchase_count == 0


class TestAutoConfirm:

    def test_sweep_at_31_minutes_confirms(self, user):
        order = age_order(place_order(user, (ProductFactory(), 1)), 31)

        assert OrderService.sweep_stale_orders() == 1

        order.refresh_from_db()
        assert order.status == Order.STATUS_CONFIRMED
        last = order.status_history.last()
        assert last.status == Order.STATUS_CONFIRMED
        assert last.note == AUTO_CONFIRM_NOTE

    def test_sweep_leaves_young_and_moved_orders_alone(self, user):
        young = place_order(user, (ProductFactory(), 1))
        preparing = age_order(place_order(user, (ProductFactory(), 1)), 45)
        Order.objects.filter(pk=preparing.pk).update(status=Order.STATUS_PREPARING)

        assert OrderService.sweep_stale_orders() == 0

        young.refresh_from_db()
        assert young.status == Order.STATUS_NEW

    def test_sweep_is_idempotent(self, user):
        order = age_order(place_order(user, (ProductFactory(), 1)), 60)

        assert OrderService.sweep_stale_orders() == 1
        assert OrderService.sweep_stale_orders() == 0
        assert order.status_history.filter(status=Order.STATUS_CONFIRMED).count() == 1

    def test_sweep_continues_after_a_failure(self, user, monkeypatch):
        first = age_order(place_order(user, (ProductFactory(), 1)), 50)
        second = age_order(place_order(user, (ProductFactory(), 1)), 40)
        original = OrderService.confirm_if_new

        def flaky(order_id, note=AUTO_CONFIRM_NOTE):
            if order_id == first.id:
                raise RuntimeError('database hiccup')
            return original(order_id, note)

        monkeypatch.setattr(OrderService, 'confirm_if_new', staticmethod(flaky))

        assert OrderService.sweep_stale_orders() == 1
        second.refresh_from_db()
        assert second.status == Order.STATUS_CONFIRMED

    def test_confirm_if_new_only_once(self, user):
        order = place_order(user, (ProductFactory(), 1))

        assert OrderService.confirm_if_new(order.id) is True
        assert OrderService.confirm_if_new(order.id) is False
        assert OrderService.confirm_if_new(999999) is False
        assert_history_matches_status(order)

    def test_timer_callback_confirms(self, user, monkeypatch):
        monkeypatch.setattr(scheduler, 'close_old_connections', lambda: None)
        order = place_order(user, (ProductFactory(), 1))

        scheduler._auto_confirm(order.id)

        order.refresh_from_db()
        assert order.status == Order.STATUS_CONFIRMED

    def test_timer_callback_swallows_errors(self, monkeypatch):
        monkeypatch.setattr(scheduler, 'close_old_connections', lambda: None)

        def boom(order_id, note=AUTO_CONFIRM_NOTE):
            raise RuntimeError('boom')

        monkeypatch.setattr(OrderService, 'confirm_if_new', staticmethod(boom))

        scheduler._auto_confirm(1)

    def test_timer_disabled(self, settings):
        settings.ORDER_AUTO_CONFIRM_TIMER_ENABLED = False
        assert scheduler.schedule_auto_confirm(1) is None

    def test_timer_armed_as_daemon(self, settings, monkeypatch):
        settings.ORDER_AUTO_CONFIRM_TIMER_ENABLED = True
        settings.ORDER_AUTO_CONFIRM_MINUTES = 30
        armed = []

        class FakeTimer:
            def __init__(self, interval, function, args=None):
                self.interval = interval
                self.args = args
                self.daemon = False
                self.started = False
                armed.append(self)

            def start(self):
                self.started = True

        monkeypatch.setattr(scheduler.threading, 'Timer', FakeTimer)

        scheduler.schedule_auto_confirm(42)

        timer = armed[0]
        assert timer.interval == 30 * 60
        assert timer.args == (42,)
        assert timer.daemon and timer.started


class TestReadProjections:

    def test_get_order_checks_owner(self, user):
        order = place_order(user, (ProductFactory(), 1))

        assert OrderService.get_order(order.id, user) == order
        assert OrderService.get_order(order.id) == order
        with pytest.raises(Forbidden):
            OrderService.get_order(order.id, UserFactory())
        with pytest.raises(NotFound):
            OrderService.get_order(999999)

    def test_list_by_status_and_user(self, user):
        other = UserFactory()
        mine = place_order(user, (ProductFactory(), 1))
        theirs = place_order(other, (ProductFactory(), 1))
        OrderService.admin_set_status(theirs.id, Order.STATUS_CONFIRMED)

        assert list(OrderService.list_user_orders(user)) == [mine]
        assert list(OrderService.list_user_orders(user, 'confirmed')) == []
        assert list(OrderService.list_orders(status='CONFIRMED')) == [theirs]
        assert list(OrderService.list_orders(user_id=user.id)) == [mine]
        with pytest.raises(InvalidStatus):
            OrderService.list_orders(status='LOST')

    def test_history_is_append_only_record(self, user):
        order = place_order(user, (ProductFactory(), 1))
        OrderService.admin_set_status(order.id, Order.STATUS_CONFIRMED)
        OrderService.admin_set_status(order.id, Order.STATUS_PREPARING)
        OrderService.request_cancellation(order.id, user)

        statuses = list(
            OrderStatusHistory.objects.filter(order=order).values_list('status', flat=True)
        )
        assert statuses == [
            Order.STATUS_NEW, Order.STATUS_CONFIRMED,
            Order.STATUS_PREPARING, Order.STATUS_CANCEL_REQUESTED,
        ]
