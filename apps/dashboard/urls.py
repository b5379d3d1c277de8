"""URL routing for the staff dashboard."""

from __future__ import annotations

from django.urls import path  # type: ignore

from . import views

urlpatterns = [
    path("dashboard", views.dashboard, name="dashboard"),
    path("reservations-new", views.new_reservations, name="reservations-new"),
    path("reservations-all", views.all_reservations, name="reservations-all"),
    path("reservations-calendar", views.reservations_calendar, name="reservations-calendar"),
    path(
        "reservations/<str:src>/<int:reservation_id>/show",
        views.show_reservation,
        name="show-reservation",
    ),
    path(
        "process-reservation/<str:src>/<int:reservation_id>/do",
        views.process_reservation,
        name="process-reservation",
    ),
    path(
        "delete-reservation/<str:src>/<int:reservation_id>/do",
        views.delete_reservation,
        name="delete-reservation",
    ),
]
