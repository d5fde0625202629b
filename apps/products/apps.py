"""
Products app configuration.
"""
from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.products'
    label = 'products'
    verbose_name = 'Products'

    def ready(self):
        from .interfaces import admin  # noqa: F401
