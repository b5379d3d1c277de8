"""Reservation domain models."""

from __future__ import annotations

from django.core.exceptions import ValidationError  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Restriction(models.Model):
    """Kind of room restriction (guest reservation or owner block)."""

    RESERVATION = 1
    OWNER_BLOCK = 2

    restriction_name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Restriction")
        verbose_name_plural = _("Restrictions")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.restriction_name


class Reservation(models.Model):
    """A guest's stay in a room."""

    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=50)
    start_date = models.DateField()
    end_date = models.DateField()
    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.CASCADE,
        related_name="reservations",
    )
    processed = models.PositiveSmallIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Reservation")
        verbose_name_plural = _("Reservations")
        ordering = ["start_date"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gt=models.F("start_date")),
                name="reservation_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["processed"], name="reservation_process_8f1c2a_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}: {self.start_date} - {self.end_date}"

    def clean(self) -> None:
        if self.start_date and self.end_date and self.start_date >= self.end_date:
            raise ValidationError(_("Departure must be after arrival."))

    @property
    def is_processed(self) -> bool:
        return self.processed == 1

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days


class RoomRestriction(models.Model):
    """Occupies a room for a date range; start inclusive, end exclusive."""

    start_date = models.DateField()
    end_date = models.DateField()
    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.CASCADE,
        related_name="restrictions",
    )
    reservation = models.ForeignKey(
        Reservation,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="room_restrictions",
    )
    restriction = models.ForeignKey(
        Restriction,
        on_delete=models.PROTECT,
        related_name="room_restrictions",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room restriction")
        verbose_name_plural = _("Room restrictions")
        ordering = ["start_date"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gt=models.F("start_date")),
                name="room_restriction_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "start_date", "end_date"], name="reservation_room_id_4b7d9e_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.room}: {self.start_date} - {self.end_date} ({self.restriction})"

    @property
    def is_block(self) -> bool:
        return self.reservation_id is None
