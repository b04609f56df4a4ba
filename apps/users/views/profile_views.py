"""
User profile management views.
"""
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.common.utils import success_response, error_response
from ..serializers import UserDetailSerializer, UserUpdateSerializer


class UserProfileView(APIView):
    """Read or update the current user's profile"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = UserDetailSerializer(request.user)
        return success_response(serializer.data, 'User info retrieved successfully')

    def patch(self, request):
        serializer = UserUpdateSerializer(request.user, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            return success_response(UserDetailSerializer(request.user).data, 'Profile updated successfully')
        return error_response('Profile update failed', serializer.errors)
