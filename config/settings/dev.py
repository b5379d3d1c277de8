"""Development settings for the bookings project.

This module extends the base settings with development specific
configuration, such as enabling debug, plain cookies and the console
email backend. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Cookies travel over plain http on the development server
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

# Use console email backend during development
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# Run the mail queue inline unless a broker is explicitly configured
CELERY_TASK_ALWAYS_EAGER = get_bool_env('CELERY_TASK_ALWAYS_EAGER', True)  # noqa: F405

LOGGING["handlers"]["console"]["formatter"] = "console"  # noqa: F405
