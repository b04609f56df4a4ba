"""
Common views module.
"""
from .notification_views import list_notifications, mark_notification_read

__all__ = [
    'list_notifications',
    'mark_notification_read',
]
