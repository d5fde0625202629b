"""
Local development settings.
"""
from .base import *  # noqa: F401,F403
from .base import env_bool

DEBUG = env_bool('DJANGO_DEBUG', True)
ALLOWED_HOSTS = ['*']
EXPOSE_PASSWORD_RESET_TOKEN = env_bool('EXPOSE_PASSWORD_RESET_TOKEN', True)
