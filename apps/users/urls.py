"""URL declarations for the users app."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import LoginView, logout_view

urlpatterns = [
    path("login", LoginView.as_view(), name="login"),
    path("logout", logout_view, name="logout"),
]
