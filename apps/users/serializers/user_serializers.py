"""
User serializers for detail, registration, and update operations.
"""
from django.contrib.auth.hashers import make_password
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from ..models import User


class UserDetailSerializer(serializers.ModelSerializer):
    """
    Serializer for the profile view.
    Does not include sensitive fields like password.
    """

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email', 'phone', 'first_name', 'last_name',
            'address', 'date_of_birth', 'avatar', 'verified', 'points',
            'is_staff', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'username', 'verified', 'points', 'is_staff', 'created_at', 'updated_at']


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Serializer for user registration (create operation).
    Used for: POST /api/users/register
    """
    password = serializers.CharField(write_only=True)
    confirm_password = serializers.CharField(write_only=True)
    email = serializers.EmailField()

    class Meta:
        model = User
        fields = [
            'username', 'email', 'phone', 'password', 'confirm_password',
            'first_name', 'last_name', 'date_of_birth', 'address'
        ]

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("Email already registered")
        return value

    def validate(self, attrs):
        """Object-level validation: check password confirmation"""
        if attrs.get('password') != attrs.get('confirm_password'):
            raise serializers.ValidationError({
                'confirm_password': "Passwords don't match"
            })
        validate_password(attrs['password'])
        return attrs

    def create(self, validated_data):
        """Create user with hashed password"""
        validated_data.pop('confirm_password')
        validated_data['password'] = make_password(validated_data['password'])
        return User.objects.create(**validated_data)


class UserUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for profile updates. Points and staff flags are not writable here.
    """

    class Meta:
        model = User
        fields = ['email', 'phone', 'first_name', 'last_name', 'address', 'date_of_birth', 'avatar']

    def validate_email(self, value):
        user = self.instance
        if User.objects.filter(email__iexact=value).exclude(pk=user.pk).exists():
            raise serializers.ValidationError("Email already registered")
        return value

    def update(self, instance, validated_data):
        """Save only the profile fields sent, leaving the points balance to PointsService"""
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save(update_fields=[*validated_data, 'updated_at'])
        return instance
