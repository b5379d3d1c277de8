"""Tests for the room pages."""

from __future__ import annotations

from django.test import TestCase
from django.urls import reverse

from apps.rooms.models import Room


class RoomPagesTests(TestCase):
    def test_seeded_rooms_exist(self) -> None:
        names = list(Room.objects.order_by("room_name").values_list("room_name", flat=True))
        self.assertEqual(names, ["Colonel's Suite", "General's Quarters"])

    def test_room_pages_render_with_availability_form(self) -> None:
        for name, slug in (("generals-quarters", "generals-quarters"), ("colonels-suite", "colonels-suite")):
            with self.subTest(page=name):
                response = self.client.get(reverse(name))
                self.assertEqual(response.status_code, 200)
                room = Room.objects.get(slug=slug)
                self.assertEqual(response.context["room"], room)
                self.assertTemplateUsed(response, f"rooms/{slug}.html")
                self.assertContains(response, f'name="room_id" value="{room.pk}"', html=False)

    def test_generic_room_page(self) -> None:
        room = Room.objects.create(room_name="Major's Loft")
        self.assertEqual(room.slug, "majors-loft")

        response = self.client.get(room.get_absolute_url())

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "rooms/room_detail.html")
        self.assertContains(response, "Major&#x27;s Loft")

    def test_unknown_room_is_404(self) -> None:
        response = self.client.get(reverse("room-detail", kwargs={"slug": "missing"}))
        self.assertEqual(response.status_code, 404)
