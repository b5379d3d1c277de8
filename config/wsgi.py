"""WSGI entry point for production servers (gunicorn, uWSGI).

Defaults to the production settings; `manage.py runserver` uses the
development ones instead.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.prod')

application = get_wsgi_application()
