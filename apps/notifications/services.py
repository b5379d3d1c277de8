"""Email notification services."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.template.loader import render_to_string  # type: ignore
from django.utils.html import strip_tags  # type: ignore

if TYPE_CHECKING:  # pragma: no cover
    from apps.reservations.models import Reservation

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "basic.html"


@dataclass
class MailData:
    """An email message waiting in the mail queue."""

    to: str
    subject: str
    content: str
    from_email: str = ""
    template: str = ""

    def as_task_payload(self) -> dict[str, str]:
        return asdict(self)


# ============================================================================
# SENDING
# ============================================================================

def render_mail(mail: MailData) -> str:
    """Wraps the HTML content in the email layout, when one is requested."""

    if not mail.template:
        return mail.content
    return render_to_string(f"emails/{mail.template}", {"content": mail.content, "subject": mail.subject})


def send_email_notification(mail: MailData) -> None:
    """
    Sends one message through Django's mail API.

    Errors propagate so the queue task can retry.
    """
    html_message = render_mail(mail)
    send_mail(
        subject=mail.subject,
        message=strip_tags(html_message),
        from_email=mail.from_email or settings.DEFAULT_FROM_EMAIL,
        recipient_list=[mail.to],
        html_message=html_message,
        fail_silently=False,
    )
    logger.info("Email sent to %s: %s", mail.to, mail.subject)


def queue_mail(mail: MailData) -> None:
    """Hands a message to the mail queue."""

    from .tasks import send_mail_task  # Local import to prevent circular dependency

    send_mail_task.delay(mail.as_task_payload())
    logger.info("Queued email to %s: %s", mail.to, mail.subject)


# ============================================================================
# RESERVATION MESSAGES
# ============================================================================

def reservation_confirmation_mail(reservation: "Reservation") -> MailData:
    content = f"""
        <strong>Reservation Confirmation</strong><br>
        Dear {reservation.first_name}: <br>
        This is to confirm your reservation from {reservation.start_date:%Y-%m-%d} to {reservation.end_date:%Y-%m-%d}.
    """
    return MailData(
        to=reservation.email,
        from_email=settings.DEFAULT_FROM_EMAIL,
        subject="Reservation Confirmation",
        content=content,
        template=DEFAULT_TEMPLATE,
    )


def reservation_owner_mail(reservation: "Reservation") -> MailData:
    content = f"""
        <strong>Reservation Notification</strong><br>
        A reservation has been made for {reservation.room.room_name} from
        {reservation.start_date:%Y-%m-%d} to {reservation.end_date:%Y-%m-%d}.
    """
    return MailData(
        to=settings.RESERVATIONS_NOTIFY_EMAIL,
        from_email=settings.DEFAULT_FROM_EMAIL,
        subject="Reservation Notification",
        content=content,
    )


def notify_reservation_created(reservation: "Reservation") -> None:
    """Queues the guest confirmation and the owner notification."""

    queue_mail(reservation_confirmation_mail(reservation))
    queue_mail(reservation_owner_mail(reservation))
