"""Monthly room calendar.

For every room the calendar holds two per-day lookups keyed by YYYY-MM-DD:
the reservation occupying the night (reservation id, 0 when free) and the
owner block on that night (room restriction id, 0 when none).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta

from apps.reservations import services
from apps.rooms.models import Room

logger = logging.getLogger(__name__)

DAY_KEY_FORMAT = "%Y-%m-%d"

ADD_BLOCK_PREFIX = "add_block_"
REMOVE_BLOCK_PREFIX = "remove_block_"


# The calendar links to the previous and following months, which must still
# be valid dates.
MIN_YEAR = 2
MAX_YEAR = 9998


def block_map_session_key(room_id: int) -> str:
    return f"block_map_{room_id}"


def parse_month(year: str | None, month: str | None) -> tuple[int, int]:
    """Validates the ``y``/``m`` pair of a calendar request.

    Raises ValueError when either part is missing, not a number or out of
    range.
    """
    year_value = int(year or "")
    month_value = int(month or "")
    if not MIN_YEAR <= year_value <= MAX_YEAR:
        raise ValueError(f"year {year_value} is out of range")
    if not 1 <= month_value <= 12:
        raise ValueError(f"month {month_value} is out of range")
    return year_value, month_value


def first_of_month(year: int, month: int) -> date:
    return date(year, month, 1)


def last_of_month(year: int, month: int) -> date:
    return shift_month(first_of_month(year, month), 1) - timedelta(days=1)


def shift_month(day: date, months: int) -> date:
    """First day of the month ``months`` away from ``day``'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def days_between(start: date, end: date):  # type: ignore
    """Yields start..end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


@dataclass
class RoomMonth:
    room: Room
    reservation_map: dict[str, int] = field(default_factory=dict)
    block_map: dict[str, int] = field(default_factory=dict)


@dataclass
class MonthCalendar:
    year: int
    month: int
    rooms: list[RoomMonth]

    @property
    def first_day(self) -> date:
        return first_of_month(self.year, self.month)

    @property
    def last_day(self) -> date:
        return last_of_month(self.year, self.month)

    @property
    def days_in_month(self) -> int:
        return self.last_day.day

    @property
    def next_month(self) -> date:
        return shift_month(self.first_day, 1)

    @property
    def last_month(self) -> date:
        return shift_month(self.first_day, -1)


def build_room_month(room: Room, first_day: date, last_day: date) -> RoomMonth:
    room_month = RoomMonth(room=room)
    for day in days_between(first_day, last_day):
        key = day.strftime(DAY_KEY_FORMAT)
        room_month.reservation_map[key] = 0
        room_month.block_map[key] = 0

    for restriction in services.get_restrictions_for_room_by_date(room.pk, first_day, last_day):
        # Restrictions occupy the nights from start_date up to, not including,
        # end_date; the departure day stays free as in the availability check.
        nights_start = max(restriction.start_date, first_day)
        nights_end = min(restriction.end_date - timedelta(days=1), last_day)
        for day in days_between(nights_start, nights_end):
            key = day.strftime(DAY_KEY_FORMAT)
            if restriction.reservation_id:
                room_month.reservation_map[key] = restriction.reservation_id
            else:
                room_month.block_map[key] = restriction.pk
    return room_month


def build_month_calendar(year: int, month: int) -> MonthCalendar:
    first_day = first_of_month(year, month)
    last_day = last_of_month(year, month)
    rooms = [build_room_month(room, first_day, last_day) for room in Room.objects.order_by("room_name")]
    return MonthCalendar(year=year, month=month, rooms=rooms)


def remember_block_maps(session, calendar: MonthCalendar) -> None:
    """Saves the block maps shown on the calendar, tagged with their month."""

    for room_month in calendar.rooms:
        session[block_map_session_key(room_month.room.pk)] = {
            "year": calendar.year,
            "month": calendar.month,
            "blocks": room_month.block_map,
        }


def saved_block_maps(session, year: int, month: int) -> dict[int, dict[str, int]]:
    """Block maps saved for the given month, keyed by room id.

    Maps saved for another month (the calendar open in a second tab) are
    left out, so saving one month never removes blocks of another.
    """

    maps: dict[int, dict[str, int]] = {}
    for room in Room.objects.all():
        saved = session.get(block_map_session_key(room.pk))
        if not isinstance(saved, dict) or (saved.get("year"), saved.get("month")) != (year, month):
            continue
        if saved.get("blocks"):
            maps[room.pk] = saved["blocks"]
    return maps


def apply_block_changes(posted, session_block_maps: dict[int, dict[str, int]]) -> tuple[int, int]:
    """Applies the calendar form to the owner blocks.

    A block shown on the calendar whose ``remove_block_<room>_<day>`` box
    is no longer posted is deleted; every posted ``add_block_<room>_<day>``
    becomes a new one-night block. Returns (removed, added).
    """

    removed_ids: set[int] = set()
    for room_id, block_map in session_block_maps.items():
        for day, restriction_id in block_map.items():
            if restriction_id <= 0 or restriction_id in removed_ids:
                continue
            if f"{REMOVE_BLOCK_PREFIX}{room_id}_{day}" not in posted:
                services.delete_block_by_id(restriction_id)
                removed_ids.add(restriction_id)

    added = 0
    for name in posted:
        if not name.startswith(ADD_BLOCK_PREFIX):
            continue
        try:
            room_part, day_part = name[len(ADD_BLOCK_PREFIX):].split("_", 1)
            room_id = int(room_part)
            day = date.fromisoformat(day_part)
            next_day = day + timedelta(days=1)
        except (ValueError, OverflowError):
            logger.warning("Ignoring malformed calendar field %s", name)
            continue
        if not Room.objects.filter(pk=room_id).exists():
            logger.warning("Ignoring block for unknown room %s", room_id)
            continue
        if not services.search_availability_by_dates_by_room_id(day, next_day, room_id):
            logger.info("Room %s is already taken on %s, block skipped", room_id, day)
            continue
        services.insert_block_for_room(room_id, day)
        added += 1

    return len(removed_ids), added
