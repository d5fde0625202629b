"""
Test settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = False
SECRET_KEY = 'test-secret-key-not-for-production-use-0123456789'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
EXPOSE_PASSWORD_RESET_TOKEN = True
