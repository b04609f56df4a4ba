"""
Order lifecycle service: checkout, cancellation, admin status control and
automatic confirmation.

Every status change goes through ``_transition`` on a row read with
``select_for_update()`` inside ``transaction.atomic()``, and appends exactly
one OrderStatusHistory row. Notifications and timers are registered with
``transaction.on_commit`` so a rolled-back request leaves no trace.
"""
import logging
import uuid
from datetime import timedelta
from typing import List, Optional

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.cart.services import CartService
from apps.common.exceptions import (
    EmptyCart, InvalidShippingInfo, Forbidden, CancellationWindowClosed,
    OrderAlreadyTerminal, InvalidStatus, NotFound, ShopError
)
from apps.common.models import Notification
from apps.common.services import NotificationService
from apps.products.services import InventoryService, StockLine
from apps.promotions.services import DiscountResolver
from apps.promotions.services.discount_resolver import to_money
from ..models import Order, OrderItem, OrderStatusHistory
from ..scheduler import schedule_auto_confirm

logger = logging.getLogger(__name__)

AUTO_CONFIRM_NOTE = 'Automatically confirmed'

REQUIRED_SHIPPING_FIELDS = ('name', 'address', 'phone')
OPTIONAL_SHIPPING_FIELDS = ('city', 'country')


def normalize_status(value) -> Optional[str]:
    """Upper-cased status if it is one we know, else None"""
    status = (value or '').strip().upper()
    if status in dict(Order.STATUS_CHOICES):
        return status
    return None


class OrderService:
    """Service class for order lifecycle business logic"""

    @staticmethod
    def generate_order_number() -> str:
        return f"ORD{timezone.now():%Y%m%d}{uuid.uuid4().hex[:10].upper()}"

    @staticmethod
    def clean_shipping_info(shipping_info) -> dict:
        shipping_info = shipping_info or {}
        cleaned = {
            field: str(shipping_info.get(field) or '').strip()
            for field in REQUIRED_SHIPPING_FIELDS + OPTIONAL_SHIPPING_FIELDS
        }
        missing = [field for field in REQUIRED_SHIPPING_FIELDS if not cleaned[field]]
        if missing:
            raise InvalidShippingInfo(missing=missing)
        return cleaned

    @staticmethod
    def _lock_order(order_id) -> Order:
        order = Order.objects.select_for_update().filter(pk=order_id).first()
        if order is None:
            raise NotFound(f'Order {order_id} not found')
        return order

    @staticmethod
    def _stock_lines(order) -> List[StockLine]:
        return [
            StockLine(product_id=item.product_id, quantity=item.quantity)
            for item in order.items.all()
        ]

    @staticmethod
    def _append_history(order, status, note=''):
        OrderStatusHistory.objects.create(order=order, status=status, note=note)

    @staticmethod
    def _transition(order, new_status, note):
        previous = order.status
        order.status = new_status
        update_fields = ['status', 'updated_at']
        if new_status == Order.STATUS_DELIVERED:
            order.delivered_at = timezone.now()
            update_fields.append('delivered_at')
        order.save(update_fields=update_fields)
        OrderService._append_history(order, new_status, note)

        logger.info(f"Order {order.order_number}: {previous} -> {new_status} ({note})")
        NotificationService.publish_on_commit(
            order.user_id,
            f"Order {order.order_number} is now {new_status}",
            Notification.CATEGORY_ORDER,
        )
        return order

    @staticmethod
    def create_order(user, payment_method, shipping_info, note=None,
                     promotion_code=None, points_to_redeem=None) -> Order:
        """
        Turn the user's cart into a NEW order.

        Validation of the discount inputs happens before anything is written;
        stock, the single-use promotion and points are then consumed with
        conditional updates, all in one transaction.
        """
        if payment_method not in dict(Order.PAYMENT_CHOICES):
            raise ShopError(f'Unsupported payment method: {payment_method}')

        with transaction.atomic():
            # A second checkout of the same cart waits here, then finds it empty
            CartService.lock_cart(user)
            lines = CartService.snapshot(user)
            if not lines:
                raise EmptyCart()
            shipping = OrderService.clean_shipping_info(shipping_info)

            subtotal = to_money(sum(line.line_total for line in lines))
            quote = DiscountResolver.quote(subtotal, user.id, promotion_code, points_to_redeem)

            order = Order.objects.create(
                order_number=OrderService.generate_order_number(),
                user=user,
                subtotal_amount=quote.order_total,
                discount_amount=quote.discount_amount,
                total_amount=quote.final_amount,
                applied_code=quote.applied_code,
                points_redeemed=quote.points_redeemed,
                payment_method=payment_method,
                status=Order.STATUS_NEW,
                shipping_name=shipping['name'],
                shipping_address=shipping['address'],
                shipping_phone=shipping['phone'],
                shipping_city=shipping['city'],
                shipping_country=shipping['country'],
                note=note or '',
            )
            OrderItem.objects.bulk_create([
                OrderItem(
                    order=order,
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    line_total=to_money(line.line_total),
                )
                for line in lines
            ])

            InventoryService.reserve(
                StockLine(product_id=line.product_id, quantity=line.quantity) for line in lines
            )
            DiscountResolver.commit(quote, user.id, reference_id=order.order_number)
            OrderService._append_history(order, Order.STATUS_NEW, 'Order placed')
            CartService.clear_cart(user)

            order_id = order.id
            transaction.on_commit(lambda: schedule_auto_confirm(order_id))
            NotificationService.publish_on_commit(
                user.id,
                f"Order {order.order_number} placed, total {order.total_amount}",
                Notification.CATEGORY_ORDER,
            )

        logger.info(
            f"Order {order.order_number} created for user {user.id}: "
            f"subtotal {quote.order_total}, discount {quote.discount_amount} ({quote.source}), "
            f"total {quote.final_amount}"
        )
        return order

    @staticmethod
    def request_cancellation(order_id, requester, now=None) -> Order:
        """
        Customer cancellation. NEW inside the window cancels outright and
        restores stock; PREPARING only becomes CANCELREQUESTED.
        """
        now = now or timezone.now()
        with transaction.atomic():
            order = OrderService._lock_order(order_id)
            if order.user_id != requester.id:
                logger.warning(f"User {requester.id} tried to cancel order {order.order_number}")
                raise Forbidden()

            elapsed_minutes = (now - order.created_at).total_seconds() / 60
            window = settings.ORDER_CANCEL_WINDOW_MINUTES

            if order.status == Order.STATUS_NEW and elapsed_minutes <= window:
                InventoryService.restore(OrderService._stock_lines(order))
                return OrderService._transition(order, Order.STATUS_CANCELED, 'Canceled by customer')

            if order.status == Order.STATUS_PREPARING:
                return OrderService._transition(
                    order, Order.STATUS_CANCEL_REQUESTED, 'Cancellation requested by customer'
                )

            logger.warning(
                f"Cancellation rejected for order {order.order_number}: "
                f"status {order.status}, {elapsed_minutes:.1f} minutes old"
            )
            raise CancellationWindowClosed(order.status, elapsed_minutes)

    @staticmethod
    def admin_set_status(order_id, new_status, note=None) -> Order:
        with transaction.atomic():
            order = OrderService._lock_order(order_id)
            if order.is_terminal:
                raise OrderAlreadyTerminal(
                    f'Order {order.order_number} is already {order.status}',
                    status=order.status,
                )

            status = normalize_status(new_status)
            if status is None:
                raise InvalidStatus(f'Unknown status: {new_status}', status=new_status)

            # CANCELREQUESTED orders were never restored; approval does not restore either
            if status == Order.STATUS_CANCELED and order.status != Order.STATUS_CANCEL_REQUESTED:
                InventoryService.restore(OrderService._stock_lines(order))

            return OrderService._transition(order, status, note or f'Status set to {status} by staff')

    @staticmethod
    def confirm_if_new(order_id, note=AUTO_CONFIRM_NOTE) -> bool:
        """NEW -> CONFIRMED; silently does nothing if the order moved on"""
        with transaction.atomic():
            order = Order.objects.select_for_update().filter(pk=order_id).first()
            if order is None or order.status != Order.STATUS_NEW:
                return False
            OrderService._transition(order, Order.STATUS_CONFIRMED, note)
            return True

    @staticmethod
    def sweep_stale_orders(now=None) -> int:
        """Confirm every NEW order older than the auto-confirm delay"""
        now = now or timezone.now()
        cutoff = now - timedelta(minutes=settings.ORDER_AUTO_CONFIRM_MINUTES)
        order_ids = list(
            Order.objects.filter(status=Order.STATUS_NEW, created_at__lte=cutoff)
            .order_by('created_at')
            .values_list('id', flat=True)
        )

        confirmed = 0
        for order_id in order_ids:
            try:
                if OrderService.confirm_if_new(order_id, AUTO_CONFIRM_NOTE):
                    confirmed += 1
            except Exception:
                logger.exception(f"Auto-confirm failed for order {order_id}")

        if order_ids:
            logger.info(f"Sweep confirmed {confirmed} of {len(order_ids)} stale orders")
        return confirmed

    @staticmethod
    def get_order(order_id, user=None) -> Order:
        order = (
            Order.objects.select_related('user')
            .prefetch_related('items', 'status_history')
            .filter(pk=order_id)
            .first()
        )
        if order is None:
            raise NotFound(f'Order {order_id} not found')
        if user is not None and order.user_id != user.id:
            raise Forbidden()
        return order

    @staticmethod
    def _filter_status(orders, status):
        if not status:
            return orders
        normalized = normalize_status(status)
        if normalized is None:
            raise InvalidStatus(f'Unknown status: {status}', status=status)
        return orders.filter(status=normalized)

    @staticmethod
    def list_user_orders(user, status=None):
        orders = Order.objects.filter(user=user).prefetch_related('items', 'status_history')
        return OrderService._filter_status(orders, status)

    @staticmethod
    def list_orders(status=None, user_id=None):
        orders = Order.objects.select_related('user').prefetch_related('items', 'status_history')
        if user_id:
            orders = orders.filter(user_id=user_id)
        return OrderService._filter_status(orders, status)
