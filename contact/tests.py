"""
Tests for the Contact Form API
"""
import pytest
from unittest.mock import patch, MagicMock
from rest_framework import status

from core.resend_service import ResendError
from contact.serializers import (
    ContactSubmissionSerializer,
    is_valid_email,
    is_honeypot_filled,
    ERROR_REQUIRED,
    ERROR_EMAIL,
    ERROR_NAME_LENGTH,
    ERROR_MESSAGE_LENGTH,
)
from contact.emails import build_owner_notification, build_confirmation
from contact.tasks import send_contact_confirmation, queue_contact_confirmation

URL = '/api/contact'


@pytest.fixture
def valid_payload():
    return {
        'name': 'John Doe',
        'email': 'john@example.com',
        'message': 'I need a website for my business',
        'website': '',
    }


@pytest.fixture
def mock_relay():
    with patch('contact.views.send_owner_notification', return_value='msg_123') as relay:
        yield relay


@pytest.fixture
def mock_queue():
    with patch('contact.views.queue_contact_confirmation', return_value=True) as queue:
        yield queue


class TestMethodHandling:
    """Only POST is accepted."""

    def test_get_returns_405(self, api_client):
        response = api_client.get(URL)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.json() == {'success': False, 'error': 'Method Not Allowed'}

    def test_put_returns_405(self, api_client, valid_payload):
        response = api_client.put(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.json()['error'] == 'Method Not Allowed'

    def test_options_returns_405(self, api_client):
        response = api_client.options(URL)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.json() == {'success': False, 'error': 'Method Not Allowed'}
        assert 'Public endpoint' not in response.content.decode()

    def test_cors_preflight_is_answered(self, api_client, settings):
        settings.CORS_ALLOW_ALL_ORIGINS = True

        response = api_client.options(
            URL,
            HTTP_ORIGIN='https://example.com',
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
        )

        assert response.status_code == status.HTTP_200_OK
        assert 'access-control-allow-origin' in response.headers


class TestContactValidation:
    """Validation failures return 400 with a single error message."""

    @pytest.mark.parametrize('field', ['name', 'email', 'message'])
    def test_missing_field(self, api_client, valid_payload, mock_relay, field):
        valid_payload[field] = ''

        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'success': False, 'error': ERROR_REQUIRED}
        mock_relay.assert_not_called()

    def test_absent_fields(self, api_client, mock_relay):
        response = api_client.post(URL, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == ERROR_REQUIRED

    def test_whitespace_only_fields(self, api_client, mock_relay):
        data = {'name': '   ', 'email': '   ', 'message': '   '}

        response = api_client.post(URL, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['success'] is False

    def test_invalid_email(self, api_client, valid_payload, mock_relay):
        valid_payload['email'] = 'not-an-email'

        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'valid email' in response.json()['error']

    def test_name_too_short(self, api_client, valid_payload, mock_relay):
        valid_payload['name'] = 'J'

        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == ERROR_NAME_LENGTH

    def test_name_too_long(self, api_client, valid_payload, mock_relay):
        valid_payload['name'] = 'J' * 101

        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'].startswith('Name must be')

    def test_message_too_short(self, api_client, valid_payload, mock_relay):
        valid_payload['message'] = 'Hi'

        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == ERROR_MESSAGE_LENGTH

    def test_message_too_long(self, api_client, valid_payload, mock_relay):
        valid_payload['message'] = 'x' * 5001

        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'].startswith('Message must be')

    def test_email_checked_before_lengths(self, api_client, mock_relay):
        data = {'name': 'J', 'email': 'bad', 'message': 'short'}

        response = api_client.post(URL, data, format='json')

        assert response.json()['error'] == ERROR_EMAIL

    def test_non_string_field(self, api_client, valid_payload, mock_relay):
        valid_payload['name'] = ['John', 'Doe']

        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == ERROR_REQUIRED

    def test_numeric_fields_are_not_coerced(self, api_client, mock_relay):
        data = {'name': 12345, 'email': 'a@example.com', 'message': 12345678901}

        response = api_client.post(URL, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == ERROR_REQUIRED
        mock_relay.assert_not_called()

    def test_padded_email_is_rejected(self, api_client, valid_payload, mock_relay):
        valid_payload['email'] = ' john@example.com '

        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == ERROR_EMAIL
        mock_relay.assert_not_called()

    def test_blank_email_is_required_not_invalid(self, api_client, valid_payload, mock_relay):
        valid_payload['email'] = '   '

        response = api_client.post(URL, valid_payload, format='json')

        assert response.json()['error'] == ERROR_REQUIRED


class TestHoneypot:
    """Bots filling the hidden field get a fake success."""

    def test_honeypot_returns_fake_success(self, api_client, mock_relay, mock_queue):
        data = {
            'name': 'Spam Bot',
            'email': 'spam@bot.com',
            'message': 'Buy my stuff',
            'website': 'http://spam.com',
        }

        response = api_client.post(URL, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'success': True, 'message': 'Message sent successfully'}
        mock_relay.assert_not_called()
        mock_queue.assert_not_called()

    def test_honeypot_wins_over_invalid_fields(self, api_client, mock_relay):
        response = api_client.post(URL, {'website': 'x'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        mock_relay.assert_not_called()

    @pytest.mark.parametrize('website', [{}, [], True, '0'])
    def test_non_string_honeypot_counts_as_filled(self, api_client, valid_payload, mock_relay, website):
        valid_payload['website'] = website

        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['success'] is True
        mock_relay.assert_not_called()


class TestContactSubmission:
    """Successful and failing relays."""

    def test_valid_submission(self, api_client, valid_payload, mock_relay, mock_queue):
        response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'success': True, 'message': 'Message sent successfully'}
        mock_relay.assert_called_once_with(
            'John Doe', 'john@example.com', 'I need a website for my business'
        )
        mock_queue.assert_called_once_with('John Doe', 'john@example.com')

    def test_inputs_are_trimmed_and_sanitized(self, api_client, mock_relay, mock_queue):
        data = {
            'name': '  <b>John</b> Doe  ',
            'email': 'john@example.com',
            'message': '<script>alert(1)</script>Please build my site',
        }

        response = api_client.post(URL, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        mock_relay.assert_called_once_with(
            'John Doe', 'john@example.com', 'alert(1)Please build my site'
        )

    def test_form_encoded_submission(self, api_client, valid_payload, mock_relay, mock_queue):
        response = api_client.post(URL, valid_payload)

        assert response.status_code == status.HTTP_200_OK
        mock_relay.assert_called_once()

    def test_provider_failure_returns_500(self, api_client, valid_payload, mock_queue):
        with patch(
            'contact.views.send_owner_notification',
            side_effect=ResendError('Invalid API key', status_code=401)
        ):
            response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {
            'success': False,
            'error': 'Something went wrong. Please try again.',
        }
        mock_queue.assert_not_called()

    def test_unexpected_error_returns_500(self, api_client, valid_payload, mock_queue):
        with patch('contact.views.send_owner_notification', side_effect=RuntimeError('boom')):
            response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert 'boom' not in response.content.decode()

    def test_malformed_json_returns_500(self, api_client, mock_relay):
        response = api_client.post(URL, '{"name": ', content_type='application/json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()['success'] is False
        mock_relay.assert_not_called()

    def test_confirmation_failure_does_not_fail_request(self, api_client, valid_payload, mock_relay):
        with patch('contact.tasks.send_contact_confirmation') as task:
            task.delay.side_effect = ConnectionError('broker down')
            response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['success'] is True

    def test_relay_through_resend(self, api_client, valid_payload, mock_queue):
        """End to end down to the HTTP call made to Resend."""
        provider_response = MagicMock(ok=True, status_code=200)
        provider_response.json.return_value = {'id': 'email_123'}

        with patch('core.resend_service.requests.post', return_value=provider_response) as post:
            response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        post.assert_called_once()
        payload = post.call_args.kwargs['json']
        assert payload['to'] == ['jon@example.com']
        assert payload['subject'] == 'New Contact: John Doe via jonkumar.dev'
        assert payload['reply_to'] == 'john@example.com'
        assert 'I need a website for my business' in payload['html']
        assert post.call_args.kwargs['headers'] == {'Authorization': 'Bearer re_test_key'}

    def test_missing_api_key_returns_500(self, api_client, valid_payload, mock_queue, settings):
        settings.RESEND_API_KEY = ''

        with patch('core.resend_service.requests.post') as post:
            response = api_client.post(URL, valid_payload, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        post.assert_not_called()


class TestSubmissionSerializer:
    """Serializer rules outside the HTTP layer."""

    @pytest.mark.parametrize('email', [
        'john@example.com',
        'john.doe@mail.example.co.uk',
        '"john doe"@example.com',
        'john@[192.168.0.1]',
        'john+tag@example.io',
    ])
    def test_accepts_valid_emails(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize('email', [
        'john@example',
        'john@example.c',
        'john doe@example.com',
        'john..doe@example.com',
        '@example.com',
        'john@',
    ])
    def test_rejects_invalid_emails(self, email):
        assert not is_valid_email(email)

    def test_length_boundaries_are_inclusive(self):
        serializer = ContactSubmissionSerializer(data={
            'name': 'Jo',
            'email': 'jo@example.com',
            'message': 'x' * 10,
        })

        assert serializer.is_valid()

    def test_validated_data_drops_honeypot(self):
        serializer = ContactSubmissionSerializer(data={
            'name': 'Jane',
            'email': 'jane@example.com',
            'message': 'Hello there, I need help',
            'website': '',
        })

        assert serializer.is_valid()
        assert set(serializer.validated_data) == {'name', 'email', 'message'}

    def test_honeypot_detection(self):
        assert is_honeypot_filled({'website': 'http://spam.com'})
        assert not is_honeypot_filled({'website': ''})
        assert not is_honeypot_filled({})
        assert not is_honeypot_filled({'website': None})
        assert not is_honeypot_filled({'website': False})
        assert not is_honeypot_filled({'website': 0})
        assert not is_honeypot_filled(['website'])
        assert is_honeypot_filled({'website': {}})
        assert is_honeypot_filled({'website': []})

    def test_stray_angle_bracket_is_kept(self):
        serializer = ContactSubmissionSerializer(data={
            'name': 'Jane',
            'email': 'jane@example.com',
            'message': 'Quote for 5<10 pages please',
        })

        assert serializer.is_valid()
        assert serializer.validated_data['message'] == 'Quote for 5<10 pages please'

    def test_null_character_is_rejected(self):
        serializer = ContactSubmissionSerializer(data={
            'name': 'Jane\x00',
            'email': 'jane@example.com',
            'message': 'Hello there, I need help',
        })

        assert not serializer.is_valid()
        assert serializer.first_error == ERROR_REQUIRED

    def test_numbers_are_not_coerced_to_text(self):
        serializer = ContactSubmissionSerializer(data={
            'name': 12345,
            'email': 'a@example.com',
            'message': 'Hello there, I need help',
        })

        assert not serializer.is_valid()
        assert serializer.first_error == ERROR_REQUIRED


class TestContactEmails:
    """Email rendering."""

    def test_owner_notification_content(self):
        subject, html, text = build_owner_notification(
            'John Doe', 'john@example.com', 'Line one\nLine two & more'
        )

        assert subject == 'New Contact: John Doe via jonkumar.dev'
        assert 'Line one<br>Line two &amp; more' in html
        assert 'john@example.com' in html
        assert 'Line two & more' in text

    def test_confirmation_content(self):
        subject, html, text = build_confirmation('Jane')

        assert subject == 'Thanks for reaching out - Jon Kumar Web Solutions'
        assert 'Hi Jane,' in html
        assert '24 hours' in text


class TestConfirmationTask:
    """Best-effort confirmation email."""

    def test_sends_confirmation(self):
        with patch('contact.tasks.send_confirmation', return_value='email_456') as send:
            result = send_contact_confirmation('Jane', 'jane@example.com')

        send.assert_called_once_with('Jane', 'jane@example.com')
        assert result == 'Confirmation sent to jane@example.com (email_456)'

    def test_provider_error_is_retried(self):
        error = ResendError('rate limited', status_code=429)

        with patch('contact.tasks.send_confirmation', side_effect=error):
            with pytest.raises(ResendError):
                send_contact_confirmation('Jane', 'jane@example.com')

    def test_confirmation_goes_to_submitter(self):
        provider_response = MagicMock(ok=True, status_code=200)
        provider_response.json.return_value = {'id': 'email_789'}

        with patch('core.resend_service.requests.post', return_value=provider_response) as post:
            send_contact_confirmation('Jane', 'jane@example.com')

        payload = post.call_args.kwargs['json']
        assert payload['to'] == ['jane@example.com']
        assert payload['reply_to'] == 'jon@example.com'

    def test_queue_swallows_broker_errors(self):
        with patch('contact.tasks.send_contact_confirmation') as task:
            task.delay.side_effect = ConnectionError('broker down')

            assert queue_contact_confirmation('Jane', 'jane@example.com') is False

    def test_queue_hands_off_to_celery(self):
        with patch('contact.tasks.send_contact_confirmation') as task:
            assert queue_contact_confirmation('Jane', 'jane@example.com') is True

        task.delay.assert_called_once_with('Jane', 'jane@example.com')
