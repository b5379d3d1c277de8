"""URL routing for the reservation flow."""

from __future__ import annotations

from django.urls import path  # type: ignore

from . import views
from .api import AvailabilityJSONView

urlpatterns = [
    path("search-availability", views.SearchAvailabilityView.as_view(), name="search-availability"),
    path("search-availability-json", AvailabilityJSONView.as_view(), name="search-availability-json"),
    path("choose-room/<int:room_id>", views.choose_room, name="choose-room"),
    path("book-room", views.book_room, name="book-room"),
    path("make-reservation", views.MakeReservationView.as_view(), name="make-reservation"),
    path("reservation-summary", views.reservation_summary, name="reservation-summary"),
]
