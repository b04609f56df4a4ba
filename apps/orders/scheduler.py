"""
Per-order auto-confirm timer.

The timer is best-effort: it lives in this process only and is lost on
restart. ``manage.py sweep_stale_orders`` is what guarantees stale orders get
confirmed; both paths go through ``OrderService.confirm_if_new``.
"""
import logging
import threading

from django.conf import settings
from django.db import close_old_connections

logger = logging.getLogger(__name__)


def _auto_confirm(order_id):
    from .services import OrderService, AUTO_CONFIRM_NOTE

    try:
        if OrderService.confirm_if_new(order_id, AUTO_CONFIRM_NOTE):
            logger.info(f"Timer confirmed order {order_id}")
    except Exception:
        logger.exception(f"Auto-confirm timer failed for order {order_id}")
    finally:
        close_old_connections()


def schedule_auto_confirm(order_id, delay_seconds=None):
    """Arm a daemon timer; returns it, or None when timers are disabled"""
    if not getattr(settings, 'ORDER_AUTO_CONFIRM_TIMER_ENABLED', True):
        return None
    if delay_seconds is None:
        delay_seconds = settings.ORDER_AUTO_CONFIRM_MINUTES * 60

    timer = threading.Timer(delay_seconds, _auto_confirm, args=(order_id,))
    timer.daemon = True
    timer.start()
    logger.debug(f"Auto-confirm for order {order_id} scheduled in {delay_seconds}s")
    return timer
