"""
Django test settings.
"""
from .base import *

DEBUG = False

ALLOWED_HOSTS = ['testserver']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'cms-tests',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

CMS_ACTIVE_THEME = 'demo'
MENU_CONTEXT_CODES = ['main-menu']
SESSION_CHECK_ENABLED = True

AXES_ENABLED = False
