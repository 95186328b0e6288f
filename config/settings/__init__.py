"""
Settings module - defaults to development.
Use DJANGO_ENV (development, production, test) to switch.
"""
import os

env = os.environ.get('DJANGO_ENV', 'development')

if env == 'production':
    from .production import *
elif env == 'test':
    from .test import *
else:
    from .development import *
