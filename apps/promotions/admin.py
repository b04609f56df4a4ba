from django.contrib import admin

from .models import Promotion


@admin.register(Promotion)
class PromotionAdmin(admin.ModelAdmin):
    list_display = ['code', 'discount', 'discount_type', 'min_order_value', 'expires_at', 'user']
    list_filter = ['discount_type', 'expires_at']
    search_fields = ['code', 'user__username']
    ordering = ['expires_at']
