from django.contrib import admin

from .models import Category, Favorite, Product, ViewedProduct


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'category', 'price', 'stock_quantity', 'purchase_count', 'comment_count']
    list_filter = ['category']
    search_fields = ['name', 'description']
    readonly_fields = ['purchase_count', 'comment_count', 'created_at', 'updated_at']
    ordering = ['-created_at']


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ['user', 'product', 'created_at']
    search_fields = ['user__username', 'product__name']


@admin.register(ViewedProduct)
class ViewedProductAdmin(admin.ModelAdmin):
    list_display = ['user', 'product', 'viewed_at']
    search_fields = ['user__username', 'product__name']
