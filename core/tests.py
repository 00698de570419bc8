"""
Tests for the Resend email service
"""
import pytest
import requests
from unittest.mock import patch, MagicMock

from core.resend_service import ResendService, ResendError


def provider_response(ok=True, status_code=200, body=None, text=''):
    response = MagicMock(ok=ok, status_code=status_code, text=text)
    response.json.return_value = body if body is not None else {}
    return response


class TestResendService:
    """HTTP integration with the Resend API."""

    def test_send_email_success(self):
        with patch(
            'core.resend_service.requests.post',
            return_value=provider_response(body={'id': 'email_123'})
        ) as post:
            message_id = ResendService().send_email(
                to='jon@example.com',
                subject='Hello',
                html='<p>Hello</p>',
                text='Hello',
                reply_to='jane@example.com',
            )

        assert message_id == 'email_123'
        post.assert_called_once_with(
            'https://api.resend.com/emails',
            json={
                'from': 'Jon Kumar Web Solutions <onboarding@resend.dev>',
                'to': ['jon@example.com'],
                'subject': 'Hello',
                'html': '<p>Hello</p>',
                'text': 'Hello',
                'reply_to': 'jane@example.com',
            },
            headers={'Authorization': 'Bearer re_test_key'},
            timeout=10,
        )

    def test_optional_fields_are_omitted(self):
        with patch(
            'core.resend_service.requests.post',
            return_value=provider_response(body={'id': 'email_123'})
        ) as post:
            ResendService().send_email(
                to=['a@example.com', 'b@example.com'],
                subject='Hi',
                html='<p>Hi</p>',
                from_email='Site <site@example.com>',
            )

        payload = post.call_args.kwargs['json']
        assert payload['to'] == ['a@example.com', 'b@example.com']
        assert payload['from'] == 'Site <site@example.com>'
        assert 'text' not in payload
        assert 'reply_to' not in payload

    def test_missing_api_key(self, settings):
        settings.RESEND_API_KEY = ''

        with patch('core.resend_service.requests.post') as post:
            with pytest.raises(ResendError, match='Missing API key'):
                ResendService().send_email(to='jon@example.com', subject='Hi', html='<p>Hi</p>')

        post.assert_not_called()

    def test_api_error_carries_status_and_message(self):
        response = provider_response(
            ok=False,
            status_code=422,
            body={'statusCode': 422, 'message': 'Invalid `to` field.', 'name': 'validation_error'},
        )

        with patch('core.resend_service.requests.post', return_value=response):
            with pytest.raises(ResendError) as exc_info:
                ResendService().send_email(to='bad', subject='Hi', html='<p>Hi</p>')

        assert str(exc_info.value) == 'Invalid `to` field.'
        assert exc_info.value.status_code == 422

    def test_api_error_without_json_body(self):
        response = provider_response(ok=False, status_code=502, text='Bad Gateway')
        response.json.side_effect = ValueError('no json')

        with patch('core.resend_service.requests.post', return_value=response):
            with pytest.raises(ResendError, match='Bad Gateway'):
                ResendService().send_email(to='jon@example.com', subject='Hi', html='<p>Hi</p>')

    def test_timeout(self):
        with patch('core.resend_service.requests.post', side_effect=requests.exceptions.Timeout()):
            with pytest.raises(ResendError, match='Request timeout'):
                ResendService().send_email(to='jon@example.com', subject='Hi', html='<p>Hi</p>')

    def test_network_error(self):
        with patch(
            'core.resend_service.requests.post',
            side_effect=requests.exceptions.ConnectionError('refused')
        ):
            with pytest.raises(ResendError, match='Network error'):
                ResendService().send_email(to='jon@example.com', subject='Hi', html='<p>Hi</p>')

    def test_console_provider_logs_instead_of_sending(self, settings, caplog):
        settings.CONTACT_EMAIL_PROVIDER = 'console'
        settings.RESEND_API_KEY = ''

        with patch('core.resend_service.requests.post') as post:
            with caplog.at_level('INFO', logger='core.resend_service'):
                message_id = ResendService().send_email(
                    to='jon@example.com', subject='Console test', html='<p>Hi</p>'
                )

        assert message_id == 'console'
        post.assert_not_called()
        assert 'Console test' in caplog.text


class TestCeleryApp:
    """Worker configuration for the confirmation email."""

    def test_results_are_not_stored(self):
        from core.celery import app

        assert app.conf.task_ignore_result is True
        assert app.conf.task_time_limit == 60
