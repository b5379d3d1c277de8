"""Template filters used by the booking pages and the admin calendar."""

from __future__ import annotations

from datetime import date, datetime

from django import template  # type: ignore

register = template.Library()


@register.filter
def human_date(value: date | datetime | None) -> str:
    """Returns a date in YYYY-MM-DD format."""
    if not value:
        return ""
    return value.strftime("%Y-%m-%d")


@register.filter
def format_date(value: date | datetime | None, fmt: str) -> str:
    if not value:
        return ""
    return value.strftime(fmt)


@register.filter
def iterate(count: int) -> range:
    """Returns 0..count-1, used to loop over the days of a month."""
    return range(int(count))


@register.filter
def get_item(mapping, key):  # type: ignore
    if not mapping:
        return None
    return mapping.get(key) if hasattr(mapping, "get") else None


@register.simple_tag
def calendar_day(year: int, month: int, day: int) -> str:
    """Builds the YYYY-MM-DD key of a day of the displayed month."""
    return date(int(year), int(month), int(day)).strftime("%Y-%m-%d")
