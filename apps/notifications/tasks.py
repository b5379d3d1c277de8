"""Celery tasks for outgoing email."""

from __future__ import annotations

import logging
from smtplib import SMTPException

from celery import shared_task  # type: ignore

from .services import MailData, send_email_notification

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    name="notifications.send_mail",
    autoretry_for=(SMTPException, ConnectionError),
    retry_backoff=True,
    max_retries=5,
)
def send_mail_task(self, payload: dict[str, str]) -> bool:
    """Sends a queued message."""

    mail = MailData(**payload)
    try:
        send_email_notification(mail)
    except (SMTPException, ConnectionError) as exc:
        logger.error(
            "Failed to send email to %s (attempt %s): %s",
            mail.to,
            self.request.retries + 1,
            exc,
            exc_info=True,
        )
        raise
    return True
