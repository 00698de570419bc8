"""
Contact Form App

Handles the public contact form on the home page.

Features:
- Honeypot spam trap (bots get a fake success)
- Ordered validation with a single error message per response
- Owner notification relayed through Resend
- Best-effort confirmation email to the submitter via Celery

Submissions are never stored.
"""
