"""
Contact Email Composition

Builds and sends the emails produced by a contact form submission:
- Owner notification (sent inline, its failure fails the request)
- Submitter confirmation (queued, best effort)
"""
import logging

from django.conf import settings
from django.template.loader import render_to_string

from core.resend_service import ResendService

logger = logging.getLogger(__name__)


def _site_context():
    return {
        'site_name': 'Jon Kumar Web Solutions',
        'site_domain': getattr(settings, 'SITE_DOMAIN', 'jonkumar.dev'),
        'site_url': getattr(settings, 'SITE_URL', 'https://jonkumar.dev'),
    }


def build_owner_notification(name, email, message):
    """
    Render the owner notification for a sanitized submission.

    Returns:
        tuple: (subject, html, text)
    """
    context = {**_site_context(), 'name': name, 'email': email, 'message': message}
    subject = f"New Contact: {name} via {context['site_domain']}"
    html = render_to_string('contact/emails/owner_notification.html', context)
    text = render_to_string('contact/emails/owner_notification.txt', context)
    return subject, html, text


def build_confirmation(name):
    """
    Render the confirmation sent back to the submitter.

    Returns:
        tuple: (subject, html, text)
    """
    context = {**_site_context(), 'name': name}
    subject = f"Thanks for reaching out - {context['site_name']}"
    html = render_to_string('contact/emails/confirmation.html', context)
    text = render_to_string('contact/emails/confirmation.txt', context)
    return subject, html, text


def send_owner_notification(name, email, message, service=None):
    """
    Relay a submission to the site owner.

    Raises:
        ResendError: If the provider rejects or never receives the email
    """
    service = service or ResendService()
    subject, html, text = build_owner_notification(name, email, message)
    return service.send_email(
        to=settings.RESEND_TO_EMAIL,
        subject=subject,
        html=html,
        text=text,
        reply_to=email,
    )


def send_confirmation(name, email, service=None):
    """Send the confirmation email to the submitter."""
    service = service or ResendService()
    subject, html, text = build_confirmation(name)
    return service.send_email(
        to=email,
        subject=subject,
        html=html,
        text=text,
        reply_to=settings.RESEND_TO_EMAIL,
    )
