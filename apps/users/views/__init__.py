"""
User views module.
"""
from .auth_views import RegisterView, PasswordLoginView
from .profile_views import UserProfileView

__all__ = [
    'RegisterView',
    'PasswordLoginView',
    'UserProfileView',
]
