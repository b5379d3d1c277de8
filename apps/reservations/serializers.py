"""Serializers for the availability JSON endpoint."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .forms import DATE_INPUT_FORMATS


class AvailabilityQuerySerializer(serializers.Serializer):
    start = serializers.DateField(input_formats=DATE_INPUT_FORMATS)
    end = serializers.DateField(input_formats=DATE_INPUT_FORMATS)
    room_id = serializers.IntegerField(min_value=1)

    def validate(self, attrs):  # type: ignore
        if attrs["start"] >= attrs["end"]:
            raise serializers.ValidationError("Departure must be after arrival.")
        return attrs


class AvailabilityResultSerializer(serializers.Serializer):
    ok = serializers.BooleanField()
    message = serializers.CharField(allow_blank=True)
    room_id = serializers.CharField(allow_blank=True)
    start_date = serializers.CharField(allow_blank=True)
    end_date = serializers.CharField(allow_blank=True)
