"""
CMS admin configuration.
"""
from django.contrib import admin
from .models import CmsPage, Layout, StaticPage, Theme


@admin.register(Theme)
class ThemeAdmin(admin.ModelAdmin):
    list_display = ['name', 'code']
    prepopulated_fields = {'code': ('name',)}
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Layout)
class LayoutAdmin(admin.ModelAdmin):
    list_display = ['file_name', 'theme', 'description']
    list_filter = ['theme']
    search_fields = ['file_name', 'description']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(CmsPage)
class CmsPageAdmin(admin.ModelAdmin):
    list_display = ['title', 'file_name', 'url', 'layout_name', 'theme']
    list_filter = ['theme']
    search_fields = ['title', 'file_name', 'url']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(StaticPage)
class StaticPageAdmin(admin.ModelAdmin):
    list_display = ['title', 'file_name', 'url', 'layout_name', 'parent', 'theme']
    list_filter = ['theme']
    search_fields = ['title', 'file_name', 'url']
    readonly_fields = ['created_at', 'updated_at']
