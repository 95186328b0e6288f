"""
Menus admin configuration.
"""
from django.contrib import admin
from .models import Menu


@admin.register(Menu)
class MenuAdmin(admin.ModelAdmin):
    list_display = ['name', 'code', 'theme', 'get_item_count']
    list_filter = ['theme']
    search_fields = ['name', 'code']
    prepopulated_fields = {'code': ('name',)}
    readonly_fields = ['created_at', 'updated_at']

    def get_item_count(self, obj):
        return len(obj.items or [])
    get_item_count.short_description = 'Top-level items'
