"""Public page views and site-wide error handlers."""

from __future__ import annotations

import logging

from django.shortcuts import render  # type: ignore
from django.views.generic import TemplateView  # type: ignore

logger = logging.getLogger(__name__)


class HomeView(TemplateView):
    template_name = "pages/home.html"


class AboutView(TemplateView):
    template_name = "pages/about.html"


class ContactView(TemplateView):
    template_name = "pages/contact.html"


def server_error(request, exception: Exception | None = None):
    """Logs the failure and renders the 500 page."""

    if exception is not None:
        logger.error(
            "Server error on %s %s: %s",
            request.method,
            request.path,
            exception,
            exc_info=(type(exception), exception, exception.__traceback__),
        )
    return render(request, "500.html", status=500)


def page_not_found(request, exception):  # type: ignore
    return render(request, "404.html", status=404)
