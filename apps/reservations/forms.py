"""Forms for the guest-facing reservation flow."""

from __future__ import annotations

from django import forms  # type: ignore

DATE_INPUT_FORMATS = ["%Y-%m-%d"]

REQUIRED_MESSAGE = "This field cannot be blank"


class DateRangeForm(forms.Form):
    """Arrival/departure pair posted by the search forms."""

    start = forms.DateField(input_formats=DATE_INPUT_FORMATS, error_messages={"required": REQUIRED_MESSAGE})
    end = forms.DateField(input_formats=DATE_INPUT_FORMATS, error_messages={"required": REQUIRED_MESSAGE})

    def clean(self):  # type: ignore
        cleaned = super().clean()
        start = cleaned.get("start")
        end = cleaned.get("end")
        if start and end and start >= end:
            raise forms.ValidationError("Departure must be after arrival.")
        return cleaned


class ReservationForm(forms.Form):
    """Guest details for a reservation."""

    first_name = forms.CharField(
        min_length=3,
        error_messages={
            "required": REQUIRED_MESSAGE,
            "min_length": "This field must be at least %(limit_value)d characters long",
        },
    )
    last_name = forms.CharField(
        min_length=2,
        error_messages={
            "required": REQUIRED_MESSAGE,
            "min_length": "This field must be at least %(limit_value)d characters long",
        },
    )
    email = forms.EmailField(error_messages={"required": REQUIRED_MESSAGE, "invalid": "Invalid email address"})
    phone = forms.CharField(error_messages={"required": REQUIRED_MESSAGE})
