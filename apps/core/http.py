"""Redirect responses with explicit status codes."""

from __future__ import annotations

from django.http import HttpResponseRedirect  # type: ignore
from django.shortcuts import resolve_url  # type: ignore


class HttpResponseSeeOther(HttpResponseRedirect):
    status_code = 303


class HttpResponseTemporaryRedirect(HttpResponseRedirect):
    status_code = 307


def see_other(to, *args, **kwargs) -> HttpResponseSeeOther:  # type: ignore
    """Redirect after a POST (or a GET that changed session state)."""
    return HttpResponseSeeOther(resolve_url(to, *args, **kwargs))


def temporary_redirect(to, *args, **kwargs) -> HttpResponseTemporaryRedirect:  # type: ignore
    return HttpResponseTemporaryRedirect(resolve_url(to, *args, **kwargs))
