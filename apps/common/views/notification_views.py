"""
Notification views.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from ..serializers import NotificationSerializer
from ..services import NotificationService
from ..exceptions import NotFound
from ..utils import success_response, error_response


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_notifications(request):
    """Latest notifications of the current user"""
    notifications = NotificationService.list_for_user(request.user)
    serializer = NotificationSerializer(notifications, many=True)
    return success_response(serializer.data, 'Notifications retrieved successfully')


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def mark_notification_read(request, notification_id):
    notification = NotificationService.mark_read(request.user, notification_id)
    if notification is None:
        return error_response('Notification not found', status_code=status.HTTP_404_NOT_FOUND, kind=NotFound.kind)
    return success_response(NotificationSerializer(notification).data, 'Notification marked as read')
