"""
Celery configuration for Jon Kumar Web Solutions.

Background work is limited to the contact confirmation email, which must
never hold up or fail the contact API response.
"""
import os
from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings')

app = Celery('core')

# Load config from Django settings with CELERY_ prefix
app.config_from_object('django.conf:settings', namespace='CELERY')

# Picks up contact.tasks
app.autodiscover_tasks()

app.conf.update(
    # Nobody reads the confirmation result
    task_ignore_result=True,

    # A confirmation that outlives a few provider timeouts is abandoned
    task_soft_time_limit=45,
    task_time_limit=60,

    task_serializer='json',
    accept_content=['json'],
)
