"""Dashboard views for staff."""

from __future__ import annotations

import logging

from django.contrib import messages  # type: ignore
from django.http import Http404  # type: ignore
from django.shortcuts import render  # type: ignore
from django.urls import reverse  # type: ignore
from django.utils import timezone  # type: ignore
from django.views.decorators.http import require_GET, require_http_methods  # type: ignore

from apps.core.http import HttpResponseSeeOther
from apps.reservations import services
from apps.reservations.filters import ReservationFilterSet
from apps.reservations.models import Reservation
from apps.rooms.models import Room

from .decorators import auth_required
from .forms import ReservationEditForm
from .month_calendar import (
    apply_block_changes,
    build_month_calendar,
    parse_month,
    remember_block_maps,
    saved_block_maps,
)

logger = logging.getLogger(__name__)

LIST_SOURCES = {"new", "all", "cal"}


def _back_to(src: str, year: str | None, month: str | None) -> HttpResponseSeeOther:
    """Where to go after acting on a reservation: its list or the calendar month."""

    if year:
        return HttpResponseSeeOther(f"{reverse('dashboard:reservations-calendar')}?y={year}&m={month}")
    if src == "cal":
        return HttpResponseSeeOther(reverse("dashboard:reservations-calendar"))
    return HttpResponseSeeOther(reverse(f"dashboard:reservations-{src}"))


def _get_reservation_or_404(reservation_id: int) -> Reservation:
    try:
        return services.get_reservation_by_id(reservation_id)
    except Reservation.DoesNotExist as exc:
        raise Http404("Reservation not found") from exc


def _check_source(src: str) -> None:
    if src not in LIST_SOURCES:
        raise Http404("Unknown reservation list")


@require_GET
@auth_required
def dashboard(request):  # type: ignore
    context = {
        "new_count": services.all_new_reservations().count(),
        "total_count": services.all_reservations().count(),
        "room_count": Room.objects.count(),
    }
    return render(request, "dashboard/dashboard.html", context)


@require_GET
@auth_required
def new_reservations(request):  # type: ignore
    return render(
        request,
        "dashboard/new_reservations.html",
        {"reservations": services.all_new_reservations()},
    )


@require_GET
@auth_required
def all_reservations(request):  # type: ignore
    filterset = ReservationFilterSet(request.GET or None, queryset=services.all_reservations())
    return render(
        request,
        "dashboard/all_reservations.html",
        {"reservations": filterset.qs, "filter": filterset, "rooms": Room.objects.all()},
    )


@require_http_methods(["GET", "POST"])
@auth_required
def show_reservation(request, src: str, reservation_id: int):  # type: ignore
    _check_source(src)
    reservation = _get_reservation_or_404(reservation_id)

    if request.method == "POST":
        form = ReservationEditForm(request.POST, instance=reservation)
        if form.is_valid():
            services.update_reservation(reservation, **form.cleaned_data)
            logger.info("Reservation %s updated by user %s", reservation.pk, request.user.pk)
            messages.success(request, "Changes Saved")
            return _back_to(src, request.POST.get("year"), request.POST.get("month"))
    else:
        form = ReservationEditForm(instance=reservation)

    context = {
        "reservation": reservation,
        "form": form,
        "src": src,
        "year": request.GET.get("y", request.POST.get("year", "")),
        "month": request.GET.get("m", request.POST.get("month", "")),
    }
    return render(request, "dashboard/show_reservation.html", context)


@require_GET
@auth_required
def process_reservation(request, src: str, reservation_id: int):  # type: ignore
    _check_source(src)
    if not services.update_processed_for_reservation(reservation_id, 1):
        raise Http404("Reservation not found")
    logger.info("Reservation %s marked processed by user %s", reservation_id, request.user.pk)
    messages.success(request, "Reservation marked as processed")
    return _back_to(src, request.GET.get("y"), request.GET.get("m"))


@require_GET
@auth_required
def delete_reservation(request, src: str, reservation_id: int):  # type: ignore
    _check_source(src)
    if not services.delete_reservation(reservation_id):
        raise Http404("Reservation not found")
    logger.info("Reservation %s deleted by user %s", reservation_id, request.user.pk)
    messages.success(request, "Reservation deleted")
    return _back_to(src, request.GET.get("y"), request.GET.get("m"))


@require_http_methods(["GET", "POST"])
@auth_required
def reservations_calendar(request):  # type: ignore
    if request.method == "POST":
        return _post_calendar(request)

    today = timezone.localdate()
    year, month = today.year, today.month
    if request.GET.get("y"):
        try:
            year, month = parse_month(request.GET["y"], request.GET.get("m"))
        except ValueError:
            messages.error(request, "Invalid month")
            return HttpResponseSeeOther(reverse("dashboard:reservations-calendar"))

    calendar = build_month_calendar(year, month)
    remember_block_maps(request.session, calendar)

    return render(request, "dashboard/reservations_calendar.html", {"calendar": calendar})


def _post_calendar(request):  # type: ignore
    try:
        year, month = parse_month(request.POST.get("y"), request.POST.get("m"))
    except ValueError:
        messages.error(request, "Invalid month")
        return HttpResponseSeeOther(reverse("dashboard:reservations-calendar"))

    session_maps = saved_block_maps(request.session, year, month)

    removed, added = apply_block_changes(request.POST, session_maps)
    logger.info(
        "Calendar %s-%02d saved by user %s: %s blocks removed, %s added",
        year,
        month,
        request.user.pk,
        removed,
        added,
    )
    messages.success(request, "Changes Saved")
    return HttpResponseSeeOther(f"{reverse('dashboard:reservations-calendar')}?y={year}&m={month}")
