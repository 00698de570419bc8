import os

bind = os.getenv("GUNICORN_BIND", "unix:/var/www/jonkumar/web/gunicorn.sock")
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_tmp_dir = "/dev/shm"
# Must exceed RESEND_TIMEOUT so a slow relay still gets its 500 envelope
timeout = int(os.getenv("GUNICORN_TIMEOUT", 30))

accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")

proc_name = "jonkumar-web"


def worker_abort(worker):
    """A worker hit the timeout, most likely waiting on the email provider."""
    worker.log.warning("Worker aborted after %ss timeout", timeout)
