"""Domain services for reservations and room availability.

A room night is taken when a room restriction covers it. Restrictions are
half-open date ranges: a stay from the 1st to the 3rd occupies the nights
of the 1st and the 2nd, so another guest may arrive on the 3rd. Two ranges
overlap when ``start < other.end and end > other.start``.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable

from django.db import transaction  # type: ignore
from django.db.models import Q, QuerySet  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.rooms.models import Room

from .models import Reservation, Restriction, RoomRestriction

logger = logging.getLogger(__name__)


class ReservationError(Exception):
    """Base error for reservation workflows."""


class RoomUnavailableError(ReservationError):
    """Raised when a room is busy for the requested dates."""


def _overlapping(start_date: date, end_date: date) -> Q:
    return Q(start_date__lt=end_date) & Q(end_date__gt=start_date)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def search_availability_by_dates_by_room_id(start_date: date, end_date: date, room_id: int) -> bool:
    """Returns True when the room has no restriction overlapping the range."""

    restrictions = RoomRestriction.objects.filter(room_id=room_id).filter(_overlapping(start_date, end_date))
    restrictions = _lock_queryset_if_possible(restrictions)
    return not restrictions.exists()


def search_availability_for_all_rooms(start_date: date, end_date: date) -> list[Room]:
    """Returns the rooms free for the whole range, ordered by name."""

    busy_rooms = RoomRestriction.objects.filter(_overlapping(start_date, end_date)).values("room_id")
    return list(Room.objects.exclude(id__in=busy_rooms).order_by("room_name"))


def get_room_by_id(room_id: int) -> Room:
    return Room.objects.get(pk=room_id)


def insert_reservation(
    *,
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    start_date: date,
    end_date: date,
    room: Room,
) -> Reservation:
    return Reservation.objects.create(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        start_date=start_date,
        end_date=end_date,
        room=room,
    )


def insert_room_restriction(
    *,
    start_date: date,
    end_date: date,
    room: Room,
    restriction_id: int,
    reservation: Reservation | None = None,
) -> RoomRestriction:
    return RoomRestriction.objects.create(
        start_date=start_date,
        end_date=end_date,
        room=room,
        reservation=reservation,
        restriction_id=restriction_id,
    )


@transaction.atomic
def book_reservation(
    *,
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    start_date: date,
    end_date: date,
    room: Room,
) -> Reservation:
    """Stores a reservation together with the restriction occupying its nights."""

    if not search_availability_by_dates_by_room_id(start_date, end_date, room.pk):
        raise RoomUnavailableError(f"{room.room_name} is not available for the selected dates.")

    reservation = insert_reservation(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        start_date=start_date,
        end_date=end_date,
        room=room,
    )
    insert_room_restriction(
        start_date=start_date,
        end_date=end_date,
        room=room,
        reservation=reservation,
        restriction_id=Restriction.RESERVATION,
    )
    logger.info(
        "Reservation %s stored for room %s from %s to %s",
        reservation.pk,
        room.pk,
        start_date,
        end_date,
    )
    return reservation


def all_reservations() -> QuerySet[Reservation]:
    return Reservation.objects.select_related("room").order_by("start_date")


def all_new_reservations() -> QuerySet[Reservation]:
    return all_reservations().filter(processed=0)


def get_reservation_by_id(reservation_id: int) -> Reservation:
    return Reservation.objects.select_related("room").get(pk=reservation_id)


def update_reservation(reservation: Reservation, *, first_name: str, last_name: str, email: str, phone: str) -> None:
    reservation.first_name = first_name
    reservation.last_name = last_name
    reservation.email = email
    reservation.phone = phone
    reservation.save(update_fields=["first_name", "last_name", "email", "phone", "updated_at"])


def update_processed_for_reservation(reservation_id: int, processed: int) -> int:
    return Reservation.objects.filter(pk=reservation_id).update(processed=processed)


def delete_reservation(reservation_id: int) -> int:
    """Deletes the reservation; its room restriction goes with it."""

    deleted, _ = Reservation.objects.filter(pk=reservation_id).delete()
    return deleted


def insert_block_for_room(room_id: int, start_date: date) -> RoomRestriction:
    """Blocks a single night of a room on behalf of the owner."""

    return RoomRestriction.objects.create(
        start_date=start_date,
        end_date=start_date + timedelta(days=1),
        room_id=room_id,
        restriction_id=Restriction.OWNER_BLOCK,
    )


def delete_block_by_id(restriction_id: int) -> int:
    deleted, _ = RoomRestriction.objects.filter(pk=restriction_id, reservation__isnull=True).delete()
    return deleted


def get_restrictions_for_room_by_date(room_id: int, start_date: date, end_date: date) -> Iterable[RoomRestriction]:
    """Restrictions of a room touching the inclusive range start..end."""

    return (
        RoomRestriction.objects.filter(room_id=room_id)
        .filter(Q(end_date__gt=start_date) & Q(start_date__lte=end_date))
        .order_by("start_date")
    )
