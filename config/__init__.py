"""Project configuration: settings per environment, URL routing, the WSGI
entry point and the Celery application running the mail queue.
"""

# The Celery app must be loaded with Django so `shared_task` binds to it
# and the mail task is registered in every process.
from .celery import app as celery_app  # noqa: F401
