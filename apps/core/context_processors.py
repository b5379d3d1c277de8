"""Template data added to every rendered page."""

from __future__ import annotations


def default_data(request) -> dict[str, object]:
    user = getattr(request, "user", None)
    return {
        "is_authenticated": bool(user is not None and user.is_authenticated),
    }
