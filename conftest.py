"""
Shared pytest fixtures.
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """API client for making requests."""
    return APIClient()


@pytest.fixture(autouse=True)
def email_settings(settings):
    """Pin provider settings so tests never depend on the local .env."""
    settings.CONTACT_EMAIL_PROVIDER = 'resend'
    settings.RESEND_API_KEY = 're_test_key'
    settings.RESEND_API_URL = 'https://api.resend.com/emails'
    settings.RESEND_FROM_EMAIL = 'Jon Kumar Web Solutions <onboarding@resend.dev>'
    settings.RESEND_TO_EMAIL = 'jon@example.com'
    settings.RESEND_TIMEOUT = 10
    settings.SITE_DOMAIN = 'jonkumar.dev'
    settings.SITE_URL = 'https://jonkumar.dev'
    return settings
