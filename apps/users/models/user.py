from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Customer or staff account carrying the loyalty points balance"""
    phone = models.CharField(max_length=20, unique=True, null=True, blank=True)
    address = models.CharField(max_length=255, blank=True, default='')
    date_of_birth = models.DateField(null=True, blank=True)
    avatar = models.URLField(max_length=500, null=True, blank=True, help_text="Avatar URL stored in cloud storage")
    verified = models.BooleanField(default=False, help_text="Email verified through OTP")
    points = models.PositiveIntegerField(default=0, help_text="Loyalty points, 1 point = 1 currency unit")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.username or self.email or f"User {self.id}"
