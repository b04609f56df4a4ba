from django.urls import path

from .health_views import BasicHealthCheckView
from .views import list_notifications, mark_notification_read

app_name = 'common'

urlpatterns = [
    path('health/', BasicHealthCheckView.as_view(), name='health_check'),
    path('notifications/', list_notifications, name='notification-list'),
    path('notifications/<int:notification_id>/read', mark_notification_read, name='notification-read'),
]
