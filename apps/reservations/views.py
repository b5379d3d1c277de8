"""Views for the guest-facing reservation flow.

search-availability -> choose-room -> make-reservation -> reservation-summary,
with book-room as a shortcut from a room page straight to the guest form.
"""

from __future__ import annotations

import logging
from datetime import datetime

from django.contrib import messages  # type: ignore
from django.shortcuts import render  # type: ignore
from django.views import View  # type: ignore

from apps.core.http import see_other, temporary_redirect
from apps.notifications.services import notify_reservation_created
from apps.rooms.models import Room

from . import services
from .forms import DateRangeForm, ReservationForm
from .session import DATE_FORMAT, ReservationDraft, get_draft, pop_draft, put_draft

logger = logging.getLogger(__name__)


def _parse_date(value: str | None):  # type: ignore
    return datetime.strptime(value or "", DATE_FORMAT).date()


class SearchAvailabilityView(View):
    template_name = "reservations/search_availability.html"

    def get(self, request):  # type: ignore
        return render(request, self.template_name)

    def post(self, request):  # type: ignore
        form = DateRangeForm(request.POST)
        if not form.is_valid():
            messages.error(request, "Please enter a valid arrival and departure date")
            return see_other("search-availability")

        start_date = form.cleaned_data["start"]
        end_date = form.cleaned_data["end"]

        rooms = services.search_availability_for_all_rooms(start_date, end_date)
        if not rooms:
            messages.error(request, "No rooms available")
            return see_other("search-availability")

        put_draft(request, ReservationDraft(start_date=start_date, end_date=end_date))
        return render(request, "reservations/choose_room.html", {"rooms": rooms})


def choose_room(request, room_id: int):  # type: ignore
    """Adds the chosen room to the draft reservation."""

    draft = get_draft(request)
    if draft is None:
        messages.error(request, "Cannot get reservation from session")
        return see_other("home")

    room = Room.objects.filter(pk=room_id).first()
    if room is None:
        messages.error(request, "Cannot find room")
        return see_other("search-availability")

    draft.room_id = room.pk
    draft.room_name = room.room_name
    put_draft(request, draft)
    return see_other("make-reservation")


def book_room(request):  # type: ignore
    """Builds a draft from ``?id=&s=&e=`` and continues to the guest form."""

    try:
        room_id = int(request.GET.get("id", ""))
        start_date = _parse_date(request.GET.get("s"))
        end_date = _parse_date(request.GET.get("e"))
    except ValueError:
        messages.error(request, "Invalid booking request")
        return see_other("home")

    if end_date <= start_date:
        messages.error(request, "Invalid booking request")
        return see_other("home")

    room = Room.objects.filter(pk=room_id).first()
    if room is None:
        messages.error(request, "Cannot get room from db")
        return see_other("home")

    put_draft(
        request,
        ReservationDraft(
            start_date=start_date,
            end_date=end_date,
            room_id=room.pk,
            room_name=room.room_name,
        ),
    )
    return see_other("make-reservation")


class MakeReservationView(View):
    template_name = "reservations/make_reservation.html"

    def get(self, request):  # type: ignore
        draft = get_draft(request)
        if draft is None or draft.room_id is None:
            messages.error(request, "can't get reservation from session")
            return temporary_redirect("home")

        room = Room.objects.filter(pk=draft.room_id).first()
        if room is None:
            messages.error(request, "can't find room")
            return temporary_redirect("home")

        draft.room_name = room.room_name
        put_draft(request, draft)
        return render(request, self.template_name, self._context(draft, ReservationForm()))

    def post(self, request):  # type: ignore
        try:
            start_date = _parse_date(request.POST.get("start_date"))
            end_date = _parse_date(request.POST.get("end_date"))
        except ValueError:
            messages.error(request, "can't parse dates")
            return see_other("home")

        try:
            room_id = int(request.POST.get("room_id", ""))
        except ValueError:
            messages.error(request, "invalid data!")
            return see_other("home")

        room = Room.objects.filter(pk=room_id).first()
        if room is None:
            messages.error(request, "can't find room!")
            return see_other("home")

        form = ReservationForm(request.POST)
        draft = ReservationDraft(
            start_date=start_date,
            end_date=end_date,
            room_id=room.pk,
            room_name=room.room_name,
            first_name=request.POST.get("first_name", ""),
            last_name=request.POST.get("last_name", ""),
            email=request.POST.get("email", ""),
            phone=request.POST.get("phone", ""),
        )

        if not form.is_valid() or start_date >= end_date:
            if start_date >= end_date:
                form.add_error(None, "Departure must be after arrival.")
            return render(request, self.template_name, self._context(draft, form))

        try:
            reservation = services.book_reservation(
                room=room,
                start_date=start_date,
                end_date=end_date,
                **form.cleaned_data,
            )
        except services.RoomUnavailableError as exc:
            logger.info("Reservation rejected: %s", exc)
            messages.error(request, "Sorry, this room is no longer available for those dates")
            return see_other("search-availability")

        notify_reservation_created(reservation)

        draft.id = reservation.pk
        draft.first_name = reservation.first_name
        draft.last_name = reservation.last_name
        draft.email = reservation.email
        draft.phone = reservation.phone
        put_draft(request, draft)
        return see_other("reservation-summary")

    @staticmethod
    def _context(draft: ReservationDraft, form: ReservationForm) -> dict[str, object]:
        return {
            "reservation": draft,
            "form": form,
            "start_date": draft.start_date.strftime(DATE_FORMAT),
            "end_date": draft.end_date.strftime(DATE_FORMAT),
        }


def reservation_summary(request):  # type: ignore
    draft = pop_draft(request)
    if draft is None or draft.id is None:
        messages.error(request, "Cannot get reservation from session")
        return temporary_redirect("home")

    return render(
        request,
        "reservations/reservation_summary.html",
        {
            "reservation": draft,
            "start_date": draft.start_date.strftime(DATE_FORMAT),
            "end_date": draft.end_date.strftime(DATE_FORMAT),
        },
    )
