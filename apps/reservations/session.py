"""Session storage for the reservation in progress.

The booking flow spans several requests (search, choose a room, fill in the
guest details, summary). The draft travels between them in the session as
a plain JSON-serialisable dict.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date

SESSION_KEY = "reservation"

DATE_FORMAT = "%Y-%m-%d"


@dataclass
class ReservationDraft:
    start_date: date
    end_date: date
    room_id: int | None = None
    room_name: str = ""
    id: int | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""

    def to_session(self) -> dict[str, object]:
        data = asdict(self)
        data["start_date"] = self.start_date.isoformat()
        data["end_date"] = self.end_date.isoformat()
        return data

    @classmethod
    def from_session(cls, data: dict) -> "ReservationDraft":
        values = dict(data)
        values["start_date"] = date.fromisoformat(values["start_date"])
        values["end_date"] = date.fromisoformat(values["end_date"])
        return cls(**values)


def put_draft(request, draft: ReservationDraft) -> None:
    request.session[SESSION_KEY] = draft.to_session()


def get_draft(request) -> ReservationDraft | None:
    data = request.session.get(SESSION_KEY)
    if not data:
        return None
    try:
        return ReservationDraft.from_session(data)
    except (KeyError, TypeError, ValueError):
        return None


def pop_draft(request) -> ReservationDraft | None:
    draft = get_draft(request)
    request.session.pop(SESSION_KEY, None)
    return draft
