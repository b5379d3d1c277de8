"""Public room pages."""

from __future__ import annotations

from django.views.generic import DetailView  # type: ignore

from .models import Room


class RoomDetailView(DetailView):
    """Room page with the availability check form."""

    model = Room
    context_object_name = "room"
    template_name = "rooms/room_detail.html"

    def get_template_names(self):  # type: ignore
        # Seeded rooms have hand-written pages; others share the generic one.
        return [f"rooms/{self.object.slug}.html", self.template_name]
