"""
User serializers module.
"""
from .user_serializers import (
    UserDetailSerializer, UserRegistrationSerializer, UserUpdateSerializer
)

__all__ = [
    'UserDetailSerializer',
    'UserRegistrationSerializer',
    'UserUpdateSerializer',
]
