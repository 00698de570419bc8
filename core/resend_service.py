"""
Resend Transactional Email Service

Sends contact form emails through the Resend HTTP API.

Documentation: https://resend.com/docs/api-reference/emails/send-email
"""

import requests
import logging
from typing import List, Optional, Union
from django.conf import settings

logger = logging.getLogger(__name__)


class ResendError(Exception):
    """Raised when an email cannot be handed to Resend."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResendService:
    """
    Service for sending email via the Resend API.

    Usage:
        service = ResendService()
        message_id = service.send_email(
            to='jon@example.com',
            subject='Hello',
            html='<p>Hi</p>',
        )

    With CONTACT_EMAIL_PROVIDER = 'console' the email is logged instead of
    sent, which is handy for local development.
    """

    def __init__(self):
        # Read settings per instance: the key may not exist at import time
        self.api_key = getattr(settings, 'RESEND_API_KEY', '')
        self.api_url = getattr(settings, 'RESEND_API_URL', 'https://api.resend.com/emails')
        self.timeout = getattr(settings, 'RESEND_TIMEOUT', 10)
        self.default_from = getattr(settings, 'RESEND_FROM_EMAIL', '')
        self.provider = getattr(settings, 'CONTACT_EMAIL_PROVIDER', 'resend')

    def send_email(
        self,
        to: Union[str, List[str]],
        subject: str,
        html: str,
        text: Optional[str] = None,
        reply_to: Optional[str] = None,
        from_email: Optional[str] = None,
    ) -> str:
        """
        Send a single email.

        Args:
            to: Recipient address or list of addresses
            subject: Subject line
            html: HTML body
            text: Optional plain text alternative
            reply_to: Optional Reply-To address
            from_email: Sender, defaults to RESEND_FROM_EMAIL

        Returns:
            The Resend message id ('console' in console mode)

        Raises:
            ResendError: If the API key is missing or the request fails
        """
        recipients = [to] if isinstance(to, str) else list(to)

        payload = {
            'from': from_email or self.default_from,
            'to': recipients,
            'subject': subject,
            'html': html,
        }
        if text:
            payload['text'] = text
        if reply_to:
            payload['reply_to'] = reply_to

        if self.provider == 'console':
            return self._log_email(payload)

        if not self.api_key:
            logger.error("RESEND_API_KEY not configured")
            raise ResendError("Missing API key")

        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers={'Authorization': f'Bearer {self.api_key}'},
                timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            logger.error(f"Timeout sending email to {', '.join(recipients)}")
            raise ResendError("Request timeout")
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error sending email to {', '.join(recipients)}: {e}")
            raise ResendError(f"Network error: {e}")

        if not response.ok:
            error_message = self._error_message(response)
            logger.error(
                f"Resend API returned status {response.status_code}: {error_message}"
            )
            raise ResendError(error_message, status_code=response.status_code)

        message_id = response.json().get('id', '')
        logger.info(f"Email sent to {', '.join(recipients)}. MessageId: {message_id}")
        return message_id

    def _log_email(self, payload: dict) -> str:
        """Console provider: log the email instead of sending it."""
        logger.info(
            "Console email\n"
            f"From: {payload['from']}\n"
            f"To: {', '.join(payload['to'])}\n"
            f"Reply-To: {payload.get('reply_to', '')}\n"
            f"Subject: {payload['subject']}\n\n"
            f"{payload.get('text') or payload['html']}"
        )
        return 'console'

    @staticmethod
    def _error_message(response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text or 'Unknown error'
        if isinstance(data, dict):
            return data.get('message') or data.get('name') or 'Unknown error'
        return 'Unknown error'
