"""Tests for the staff dashboard."""

from __future__ import annotations

from datetime import date

from django.contrib.messages import get_messages
from django.test import TestCase
from django.urls import reverse

from apps.dashboard.month_calendar import block_map_session_key
from apps.reservations import services
from apps.reservations.models import Reservation, RoomRestriction
from apps.rooms.models import Room
from apps.users.models import User


class DashboardTestCase(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="admin@admin.com", password="password")
        self.client.force_login(self.user)
        self.quarters = Room.objects.get(slug="generals-quarters")
        self.suite = Room.objects.get(slug="colonels-suite")
        self.reservation = services.book_reservation(
            first_name="John",
            last_name="Smith",
            email="john@example.com",
            phone="555-1234",
            start_date=date(2050, 1, 10),
            end_date=date(2050, 1, 13),
            room=self.quarters,
        )


class AccessTests(TestCase):
    def test_anonymous_visitor_is_sent_to_login(self) -> None:
        response = self.client.get(reverse("dashboard:dashboard"))

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], reverse("login"))
        messages = [str(message) for message in get_messages(response.wsgi_request)]
        self.assertIn("Log in first!", messages)


class ReservationListTests(DashboardTestCase):
    def test_dashboard_counts(self) -> None:
        response = self.client.get(reverse("dashboard:dashboard"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["new_count"], 1)
        self.assertEqual(response.context["total_count"], 1)
        self.assertEqual(response.context["room_count"], 2)

    def test_new_and_all_lists(self) -> None:
        processed = services.book_reservation(
            first_name="Jane",
            last_name="Doe",
            email="jane@example.com",
            phone="555-9876",
            start_date=date(2050, 2, 1),
            end_date=date(2050, 2, 2),
            room=self.suite,
        )
        services.update_processed_for_reservation(processed.pk, 1)

        response = self.client.get(reverse("dashboard:reservations-new"))
        self.assertEqual(list(response.context["reservations"]), [self.reservation])

        response = self.client.get(reverse("dashboard:reservations-all"))
        self.assertEqual(list(response.context["reservations"]), [self.reservation, processed])

        response = self.client.get(reverse("dashboard:reservations-all"), {"room": self.suite.pk})
        self.assertEqual(list(response.context["reservations"]), [processed])

        response = self.client.get(reverse("dashboard:reservations-all"), {"guest": "smith"})
        self.assertEqual(list(response.context["reservations"]), [self.reservation])


class ReservationActionsTests(DashboardTestCase):
    def test_show_reservation(self) -> None:
        response = self.client.get(reverse("dashboard:show-reservation", args=["new", self.reservation.pk]))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["reservation"], self.reservation)
        self.assertEqual(response.context["src"], "new")

    def test_unknown_source_or_reservation(self) -> None:
        response = self.client.get(reverse("dashboard:show-reservation", args=["old", self.reservation.pk]))
        self.assertEqual(response.status_code, 404)

        response = self.client.get(reverse("dashboard:show-reservation", args=["all", 999]))
        self.assertEqual(response.status_code, 404)

    def test_update_reservation(self) -> None:
        response = self.client.post(
            reverse("dashboard:show-reservation", args=["all", self.reservation.pk]),
            {
                "first_name": "Johnny",
                "last_name": "Smythe",
                "email": "johnny@example.com",
                "phone": "555-0000",
                "year": "",
                "month": "",
            },
        )

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], reverse("dashboard:reservations-all"))
        self.reservation.refresh_from_db()
        self.assertEqual(self.reservation.last_name, "Smythe")

    def test_update_from_calendar_returns_to_month(self) -> None:
        response = self.client.post(
            reverse("dashboard:show-reservation", args=["cal", self.reservation.pk]),
            {
                "first_name": "John",
                "last_name": "Smith",
                "email": "john@example.com",
                "phone": "555-1234",
                "year": "2050",
                "month": "1",
            },
        )

        self.assertEqual(response["Location"], reverse("dashboard:reservations-calendar") + "?y=2050&m=1")

    def test_invalid_update_redisplays_form(self) -> None:
        response = self.client.post(
            reverse("dashboard:show-reservation", args=["all", self.reservation.pk]),
            {"first_name": "John", "last_name": "Smith", "email": "broken", "phone": "555"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertIn("email", response.context["form"].errors)

    def test_process_reservation(self) -> None:
        response = self.client.get(reverse("dashboard:process-reservation", args=["new", self.reservation.pk]))

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], reverse("dashboard:reservations-new"))
        self.reservation.refresh_from_db()
        self.assertTrue(self.reservation.is_processed)

    def test_delete_reservation_from_calendar(self) -> None:
        response = self.client.get(
            reverse("dashboard:delete-reservation", args=["cal", self.reservation.pk]),
            {"y": "2050", "m": "1"},
        )

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], reverse("dashboard:reservations-calendar") + "?y=2050&m=1")
        self.assertFalse(Reservation.objects.exists())
        self.assertFalse(RoomRestriction.objects.exists())

    def test_delete_missing_reservation(self) -> None:
        response = self.client.get(reverse("dashboard:delete-reservation", args=["all", 999]))
        self.assertEqual(response.status_code, 404)


class CalendarTests(DashboardTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.block = services.insert_block_for_room(self.suite.pk, date(2050, 1, 20))
        self.url = reverse("dashboard:reservations-calendar")

    def _room_month(self, response, room: Room):  # type: ignore
        return next(item for item in response.context["calendar"].rooms if item.room == room)

    def test_calendar_maps(self) -> None:
        response = self.client.get(self.url, {"y": "2050", "m": "1"})

        self.assertEqual(response.status_code, 200)
        calendar = response.context["calendar"]
        self.assertEqual(calendar.days_in_month, 31)
        self.assertEqual(calendar.next_month, date(2050, 2, 1))
        self.assertEqual(calendar.last_month, date(2049, 12, 1))

        quarters = self._room_month(response, self.quarters)
        self.assertEqual(len(quarters.reservation_map), 31)
        self.assertEqual(quarters.reservation_map["2050-01-09"], 0)
        self.assertEqual(quarters.reservation_map["2050-01-10"], self.reservation.pk)
        self.assertEqual(quarters.reservation_map["2050-01-12"], self.reservation.pk)
        self.assertEqual(quarters.reservation_map["2050-01-13"], 0)

        suite = self._room_month(response, self.suite)
        self.assertEqual(suite.block_map["2050-01-20"], self.block.pk)
        self.assertEqual(suite.block_map["2050-01-21"], 0)

        saved = self.client.session[block_map_session_key(self.suite.pk)]
        self.assertEqual((saved["year"], saved["month"]), (2050, 1))
        self.assertEqual(saved["blocks"]["2050-01-20"], self.block.pk)

    def test_invalid_month(self) -> None:
        response = self.client.get(self.url, {"y": "2050", "m": "13"})
        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], self.url)

    def test_save_blocks(self) -> None:
        self.client.get(self.url, {"y": "2050", "m": "1"})

        response = self.client.post(
            self.url,
            {
                "y": "2050",
                "m": "1",
                f"add_block_{self.quarters.pk}_2050-01-05": "1",
                # Already reserved, must not become a block.
                f"add_block_{self.quarters.pk}_2050-01-11": "1",
                "add_block_broken": "1",
                f"add_block_{self.quarters.pk}_9999-12-31": "1",
            },
        )

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], self.url + "?y=2050&m=1")

        # The unchecked suite block was removed.
        self.assertFalse(RoomRestriction.objects.filter(pk=self.block.pk).exists())
        blocks = RoomRestriction.objects.filter(room=self.quarters, reservation__isnull=True)
        self.assertEqual([block.start_date for block in blocks], [date(2050, 1, 5)])
        # Reservations are untouched.
        self.assertTrue(RoomRestriction.objects.filter(reservation=self.reservation).exists())

    def test_kept_blocks_survive(self) -> None:
        self.client.get(self.url, {"y": "2050", "m": "1"})

        self.client.post(
            self.url,
            {"y": "2050", "m": "1", f"remove_block_{self.suite.pk}_2050-01-20": str(self.block.pk)},
        )

        self.assertTrue(RoomRestriction.objects.filter(pk=self.block.pk).exists())

    def test_saving_one_month_keeps_blocks_of_another(self) -> None:
        february_block = services.insert_block_for_room(self.suite.pk, date(2050, 2, 5))
        # January and February open in two tabs; January is saved unchanged.
        self.client.get(self.url, {"y": "2050", "m": "1"})
        self.client.get(self.url, {"y": "2050", "m": "2"})

        response = self.client.post(
            self.url,
            {"y": "2050", "m": "1", f"remove_block_{self.suite.pk}_2050-01-20": str(self.block.pk)},
        )

        self.assertEqual(response.status_code, 303)
        self.assertTrue(RoomRestriction.objects.filter(pk=self.block.pk).exists())
        self.assertTrue(RoomRestriction.objects.filter(pk=february_block.pk).exists())

    def test_out_of_range_years(self) -> None:
        for params in ({"y": "9999", "m": "12"}, {"y": "0", "m": "1"}, {"y": "1", "m": "1"}):
            with self.subTest(params=params):
                response = self.client.get(self.url, params)
                self.assertEqual(response.status_code, 303)
                self.assertEqual(response["Location"], self.url)

        response = self.client.post(self.url, {"y": "0", "m": "1"})
        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], self.url)

    def test_last_supported_month(self) -> None:
        response = self.client.get(self.url, {"y": "9998", "m": "12"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["calendar"].next_month, date(9999, 1, 1))
