from .notification_serializers import NotificationSerializer

__all__ = [
    'NotificationSerializer',
]
