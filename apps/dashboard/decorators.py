"""Access control for dashboard views."""

from __future__ import annotations

from functools import wraps

from django.contrib import messages  # type: ignore

from apps.core.http import see_other


def auth_required(view_func):  # type: ignore
    """Sends anonymous visitors to the login page with an error message."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):  # type: ignore
        if not request.user.is_authenticated:
            messages.error(request, "Log in first!")
            return see_other("login")
        return view_func(request, *args, **kwargs)

    return _wrapped
