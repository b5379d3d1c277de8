"""Notifications app package.

Outgoing email. Messages are described by ``MailData`` and handed to a
Celery task, so request handlers never wait on the mail server.
"""
