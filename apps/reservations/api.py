"""JSON availability check used by the room pages."""

from __future__ import annotations

import logging

from django.db import DatabaseError  # type: ignore
from django.utils.decorators import method_decorator  # type: ignore
from django.views.decorators.csrf import csrf_protect  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import services
from .serializers import AvailabilityQuerySerializer, AvailabilityResultSerializer

logger = logging.getLogger(__name__)


@method_decorator(csrf_protect, name="dispatch")
class AvailabilityJSONView(APIView):
    """Reports whether one room is free for a date range.

    Always answers 200 with ``ok`` false and a message when the request
    cannot be answered, so the page script has a single response shape.
    """

    def post(self, request):  # type: ignore
        start = request.data.get("start", "")
        end = request.data.get("end", "")
        room_id = request.data.get("room_id", "")

        query = AvailabilityQuerySerializer(data={"start": start, "end": end, "room_id": room_id})
        if not query.is_valid():
            return self._respond(ok=False, message="Invalid request", room_id=room_id, start=start, end=end)

        params = query.validated_data
        try:
            available = services.search_availability_by_dates_by_room_id(
                params["start"], params["end"], params["room_id"]
            )
        except DatabaseError as exc:
            logger.error("Availability lookup failed: %s", exc, exc_info=True)
            return self._respond(ok=False, message="Error connecting to database", room_id=room_id, start=start, end=end)

        return self._respond(ok=available, message="", room_id=params["room_id"], start=start, end=end)

    @staticmethod
    def _respond(*, ok: bool, message: str, room_id, start: str, end: str) -> Response:  # type: ignore
        result = AvailabilityResultSerializer(
            {
                "ok": ok,
                "message": message,
                "room_id": str(room_id),
                "start_date": start,
                "end_date": end,
            }
        )
        return Response(result.data)
