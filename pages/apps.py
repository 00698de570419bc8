"""
Pages App Configuration
Public marketing pages (home page and style guide)
"""
from django.apps import AppConfig


class PagesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'pages'
    verbose_name = 'Site Pages'
