"""Forms for the dashboard."""

from __future__ import annotations

from django import forms  # type: ignore

from apps.reservations.models import Reservation


class ReservationEditForm(forms.ModelForm):
    """Guest contact details editable by staff."""

    class Meta:
        model = Reservation
        fields = ["first_name", "last_name", "email", "phone"]
        widgets = {
            "first_name": forms.TextInput(attrs={"class": "form-control"}),
            "last_name": forms.TextInput(attrs={"class": "form-control"}),
            "email": forms.EmailInput(attrs={"class": "form-control"}),
            "phone": forms.TextInput(attrs={"class": "form-control"}),
        }
