from django.contrib import admin

from .models import PointsTransaction


@admin.register(PointsTransaction)
class PointsTransactionAdmin(admin.ModelAdmin):
    list_display = ['user', 'transaction_type', 'amount', 'balance_after', 'reference_id', 'created_at']
    list_filter = ['transaction_type', 'created_at']
    search_fields = ['user__username', 'reference_id', 'description']
    readonly_fields = ['user', 'transaction_type', 'amount', 'balance_after', 'description', 'reference_id', 'created_at']
    ordering = ['-created_at']
