from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from . import views

urlpatterns = [
    path('register', views.RegisterView.as_view(), name='register'),
    path('login', views.PasswordLoginView.as_view(), name='password-login'),
    path('token/refresh', TokenRefreshView.as_view(), name='token-refresh'),
    path('profile', views.UserProfileView.as_view(), name='profile'),
]
