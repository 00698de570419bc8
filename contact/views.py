"""
Contact Form Views

POST /api/contact relays a validated submission to the site owner.
"""
import logging

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from core.resend_service import ResendError
from .emails import send_owner_notification
from .serializers import ContactSubmissionSerializer, is_honeypot_filled
from .tasks import queue_contact_confirmation

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = 'Message sent successfully'
GENERIC_ERROR = 'Something went wrong. Please try again.'


class ContactSubmitView(APIView):
    """
    Public endpoint for contact form submissions.

    POST /api/contact

    Body: {name, email, message, website}
    Returns {success, message} on 200, {success, error} on 400/405/500.
    """

    permission_classes = [AllowAny]

    def post(self, request):
        """Validate, sanitize and relay a contact form submission."""
        try:
            return self._handle_submission(request)
        except Exception:
            logger.exception("Contact API POST handler error")
            return self._error(GENERIC_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

    def options(self, request, *args, **kwargs):
        # CORS preflights are answered by corsheaders before reaching the view
        return self.http_method_not_allowed(request, *args, **kwargs)

    def http_method_not_allowed(self, request, *args, **kwargs):
        return self._error('Method Not Allowed', status.HTTP_405_METHOD_NOT_ALLOWED)

    def _handle_submission(self, request):
        data = request.data

        # Honeypot check - report success but send nothing
        if is_honeypot_filled(data):
            logger.warning("Honeypot field filled. Potential spam submission detected.")
            return Response(
                {'success': True, 'message': SUCCESS_MESSAGE},
                status=status.HTTP_200_OK
            )

        serializer = ContactSubmissionSerializer(data=data if hasattr(data, 'get') else {})
        if not serializer.is_valid():
            return self._error(serializer.first_error, status.HTTP_400_BAD_REQUEST)

        submission = serializer.validated_data

        try:
            send_owner_notification(
                submission['name'],
                submission['email'],
                submission['message'],
            )
        except ResendError as e:
            logger.error(f"Resend email sending failed: {e}")
            return self._error(GENERIC_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

        queue_contact_confirmation(submission['name'], submission['email'])

        return Response(
            {'success': True, 'message': SUCCESS_MESSAGE},
            status=status.HTTP_200_OK
        )

    @staticmethod
    def _error(message, status_code):
        return Response({'success': False, 'error': message}, status=status_code)
