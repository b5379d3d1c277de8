"""Tests for staff login, lockout and logout."""

from __future__ import annotations

from django.contrib.messages import get_messages
from django.test import TestCase
from django.urls import reverse

from apps.users.models import User


class LoginTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="admin@admin.com", password="password")
        self.url = reverse("login")

    def _login(self, password: str = "password"):  # type: ignore
        return self.client.post(self.url, {"email": "admin@admin.com", "password": password})

    def _messages(self, response) -> list[str]:  # type: ignore
        return [str(message) for message in get_messages(response.wsgi_request)]

    def test_login_page_renders(self) -> None:
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)

    def test_successful_login(self) -> None:
        response = self._login()

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], reverse("home"))
        self.assertIn("Logged in successfully", self._messages(response))
        self.assertEqual(int(self.client.session["_auth_user_id"]), self.user.pk)

    def test_login_rotates_session_key(self) -> None:
        self.client.get(reverse("search-availability"))
        session = self.client.session
        session["marker"] = True
        session.save()
        before = session.session_key

        self._login()

        self.assertNotEqual(self.client.session.session_key, before)

    def test_wrong_password(self) -> None:
        response = self._login(password="wrong")

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], self.url)
        self.assertIn("Invalid login credentials", self._messages(response))
        self.user.refresh_from_db()
        self.assertEqual(self.user.failed_login_attempts, 1)

    def test_invalid_form_redisplays(self) -> None:
        response = self.client.post(self.url, {"email": "not-an-email", "password": ""})

        self.assertEqual(response.status_code, 200)
        self.assertIn("email", response.context["form"].errors)
        self.assertIn("password", response.context["form"].errors)

    def test_account_locks_after_repeated_failures(self) -> None:
        for _ in range(5):
            self._login(password="wrong")

        self.user.refresh_from_db()
        self.assertTrue(self.user.is_locked)

        response = self._login()

        self.assertEqual(response["Location"], self.url)
        self.assertNotIn("_auth_user_id", self.client.session)

    def test_successful_login_resets_failures(self) -> None:
        self._login(password="wrong")
        self._login()

        self.user.refresh_from_db()
        self.assertEqual(self.user.failed_login_attempts, 0)

    def test_logout(self) -> None:
        self._login()

        response = self.client.get(reverse("logout"))

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], reverse("home"))
        self.assertNotIn("_auth_user_id", self.client.session)


class UserModelTests(TestCase):
    def test_create_superuser(self) -> None:
        user = User.objects.create_superuser(email="owner@example.com", password="secret")
        self.assertTrue(user.is_staff)
        self.assertTrue(user.is_administrator())
        self.assertEqual(user.access_level, User.AccessLevel.ADMINISTRATOR)

    def test_email_required(self) -> None:
        with self.assertRaises(ValueError):
            User.objects.create_user(email="", password="secret")


class ModelAdminTests(TestCase):
    def test_superuser_sees_model_admin(self) -> None:
        owner = User.objects.create_superuser(email="owner@example.com", password="secret")
        self.client.force_login(owner)

        for url in ("/django-admin/users/user/", "/django-admin/reservations/reservation/", "/django-admin/rooms/room/"):
            with self.subTest(url=url):
                self.assertEqual(self.client.get(url).status_code, 200)
