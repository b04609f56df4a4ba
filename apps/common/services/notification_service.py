"""
Notification sink.

Publishing is fire-and-forget: a failure here is logged and never reaches
the caller, so it cannot undo the state change that triggered it.
"""
import logging

from django.conf import settings
from django.db import transaction

from ..models import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """Best-effort per-user notification channel"""

    @staticmethod
    def publish(user_id, message, category=Notification.CATEGORY_SYSTEM):
        try:
            with transaction.atomic():
                return Notification.objects.create(
                    user_id=user_id,
                    message=message,
                    category=category,
                )
        except Exception:
            logger.exception(f"Failed to publish notification to user {user_id}")
            return None

    @staticmethod
    def publish_on_commit(user_id, message, category=Notification.CATEGORY_SYSTEM):
        """Publish once the surrounding transaction commits"""
        transaction.on_commit(
            lambda: NotificationService.publish(user_id, message, category)
        )

    @staticmethod
    def list_for_user(user, limit=None):
        limit = limit or settings.NOTIFICATIONS_LIST_LIMIT
        return Notification.objects.filter(user=user)[:limit]

    @staticmethod
    def mark_read(user, notification_id):
        updated = Notification.objects.filter(
            id=notification_id, user=user
        ).update(is_read=True)
        if not updated:
            return None
        return Notification.objects.get(id=notification_id)
