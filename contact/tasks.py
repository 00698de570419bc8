"""
Contact Email Tasks

Celery tasks for sending contact-related emails.
"""
import logging

from celery import shared_task
from django.conf import settings

from core.resend_service import ResendError
from .emails import send_confirmation

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=settings.CONTACT_CONFIRMATION_MAX_RETRIES)
def send_contact_confirmation(self, name, email):
    """
    Send the confirmation email to a contact form submitter.

    Args:
        name: Sanitized submitter name
        email: Submitter address
    """
    try:
        message_id = send_confirmation(name, email)
    except ResendError as exc:
        logger.warning(f"Confirmation email to {email} failed: {exc}")
        raise self.retry(exc=exc, countdown=settings.CONTACT_CONFIRMATION_RETRY_DELAY)

    return f"Confirmation sent to {email} ({message_id})"


def queue_contact_confirmation(name, email):
    """
    Queue the confirmation email without letting failures escape.

    Returns:
        bool: True if the task was handed to Celery
    """
    try:
        send_contact_confirmation.delay(name, email)
    except Exception:
        logger.exception(f"Could not queue confirmation email to {email}")
        return False
    return True
