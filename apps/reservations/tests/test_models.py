import pytest
from datetime import date

from django.db import IntegrityError, transaction

from apps.reservations.models import Reservation, Restriction
from apps.reservations.session import ReservationDraft
from apps.rooms.models import Room


@pytest.mark.django_db
def test_restriction_kinds_are_seeded():
    kinds = list(Restriction.objects.values_list("id", "restriction_name"))

    assert kinds == [(Restriction.RESERVATION, "Reservation"), (Restriction.OWNER_BLOCK, "Owner Block")]


@pytest.mark.django_db
def test_reservation_requires_departure_after_arrival():
    room = Room.objects.get(slug="generals-quarters")

    with pytest.raises(IntegrityError), transaction.atomic():
        Reservation.objects.create(
            first_name="John",
            last_name="Smith",
            email="john@example.com",
            phone="555",
            start_date=date(2050, 1, 3),
            end_date=date(2050, 1, 3),
            room=room,
        )


def test_draft_session_payload_is_json_friendly():
    draft = ReservationDraft(start_date=date(2050, 1, 1), end_date=date(2050, 1, 4), room_id=2, room_name="Suite")

    payload = draft.to_session()

    assert payload["start_date"] == "2050-01-01"
    assert payload["end_date"] == "2050-01-04"
    assert ReservationDraft.from_session(payload).end_date == date(2050, 1, 4)
