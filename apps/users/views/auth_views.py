"""
User authentication views.
"""
from django.contrib.auth.hashers import check_password
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from apps.common.utils import success_response, error_response
from ..models import User
from ..serializers import UserDetailSerializer, UserRegistrationSerializer


class RegisterView(APIView):
    """User registration endpoint"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        if serializer.is_valid():
            user = serializer.save()
            refresh = RefreshToken.for_user(user)
            return success_response({
                'token': str(refresh.access_token),
                'refresh': str(refresh),
                'user': UserDetailSerializer(user).data
            }, 'Registration successful', status_code=201)
        return error_response('Registration failed', serializer.errors)


class PasswordLoginView(APIView):
    """Password-based login with username or email"""
    permission_classes = [AllowAny]

    def post(self, request):
        password = request.data.get('password')
        username = request.data.get('username')
        email = request.data.get('email')

        if not password:
            return error_response('Password is required')

        user = None
        if username:
            user = User.objects.filter(username=username).first()
        elif email:
            user = User.objects.filter(email__iexact=email).first()
        else:
            return error_response('Username or email is required')

        if not user or not user.is_active or not check_password(password, user.password):
            return error_response('Invalid credentials')

        refresh = RefreshToken.for_user(user)
        return success_response({
            'token': str(refresh.access_token),
            'refresh': str(refresh),
            'user': UserDetailSerializer(user).data
        }, 'Login successful')
