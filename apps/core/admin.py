from django.contrib import admin
from .models import UserGroup


@admin.register(UserGroup)
class UserGroupAdmin(admin.ModelAdmin):
    list_display = ['name', 'code', 'get_user_count']
    search_fields = ['name', 'code']
    prepopulated_fields = {'code': ('name',)}
    filter_horizontal = ['users']
    readonly_fields = ['created_at', 'updated_at']

    def get_user_count(self, obj):
        return obj.users.count()
    get_user_count.short_description = 'Users'
