"""
Contact Form Serializers

Validates and sanitizes contact form submissions. Checks run in a fixed
order and stop at the first failure, so the API reports a single error.
"""
import re

from rest_framework import serializers
from django.utils.html import strip_tags


MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MIN_MESSAGE_LENGTH = 10
MAX_MESSAGE_LENGTH = 5000

ERROR_REQUIRED = 'All fields are required'
ERROR_EMAIL = 'Please enter a valid email address'
ERROR_NAME_LENGTH = (
    f'Name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters'
)
ERROR_MESSAGE_LENGTH = (
    f'Message must be between {MIN_MESSAGE_LENGTH} and {MAX_MESSAGE_LENGTH} characters'
)

# RFC 5322 style address: dotted or quoted local part, then a bracketed
# IPv4 literal or a dotted domain ending in a 2+ letter TLD.
EMAIL_PATTERN = re.compile(
    r'(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@'
    r'((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])'
    r'|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))'
)


def is_valid_email(value):
    """Check an address against EMAIL_PATTERN."""
    return EMAIL_PATTERN.fullmatch(value) is not None


# Honeypot values that count as "left empty". Anything else, including
# empty lists and objects, marks the submission as a bot.
EMPTY_HONEYPOT_VALUES = (None, False, 0, '')


def is_honeypot_filled(data):
    """True when the hidden 'website' field carries anything."""
    if not hasattr(data, 'get'):
        return False
    return data.get('website') not in EMPTY_HONEYPOT_VALUES


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers instead of coercing them to text."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class ContactSubmissionSerializer(serializers.Serializer):
    """
    Public contact form submission serializer.

    Expects JSON: {name, email, message, website}. The honeypot
    ('website') is checked by the view before validation runs.
    """

    name = StrictCharField(required=False, allow_blank=True, default='')
    # Untrimmed so the address is checked exactly as submitted
    email = StrictCharField(
        required=False, allow_blank=True, default='', trim_whitespace=False
    )
    message = StrictCharField(required=False, allow_blank=True, default='')

    # Honeypot field for spam prevention (should be empty)
    website = serializers.CharField(
        required=False,
        allow_blank=True,
        write_only=True,
        help_text="Honeypot field - should be empty"
    )

    def validate(self, attrs):
        name = attrs.get('name', '')
        email = attrs.get('email', '')
        message = attrs.get('message', '')

        if not name or not email.strip() or not message:
            raise serializers.ValidationError(ERROR_REQUIRED)

        if not is_valid_email(email):
            raise serializers.ValidationError(ERROR_EMAIL)

        if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
            raise serializers.ValidationError(ERROR_NAME_LENGTH)

        if not MIN_MESSAGE_LENGTH <= len(message) <= MAX_MESSAGE_LENGTH:
            raise serializers.ValidationError(ERROR_MESSAGE_LENGTH)

        # Sanitize after the length checks
        return {
            'name': strip_tags(name),
            'email': email.strip(),
            'message': strip_tags(message),
        }

    @property
    def first_error(self):
        """The single error message to report to the client."""
        errors = self.errors
        messages = errors.get('non_field_errors')
        if messages:
            return str(messages[0])
        # Field-level errors only come from non-string values
        return ERROR_REQUIRED
