"""URL routing for the room pages."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import RoomDetailView

urlpatterns = [
    path("generals-quarters", RoomDetailView.as_view(), {"slug": "generals-quarters"}, name="generals-quarters"),
    path("colonels-suite", RoomDetailView.as_view(), {"slug": "colonels-suite"}, name="colonels-suite"),
    path("rooms/<slug:slug>", RoomDetailView.as_view(), name="room-detail"),
]
