"""
URL configuration.

Only the Django admin is routed here: pages, layouts, menus and user groups
are managed under /admin/.
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    path('admin/', admin.site.urls),
]
