"""URL routing for the public pages."""

from __future__ import annotations

from django.urls import path  # type: ignore

from . import views

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),
    path("about", views.AboutView.as_view(), name="about"),
    path("contact", views.ContactView.as_view(), name="contact"),
]
