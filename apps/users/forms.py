"""Forms for the users app."""

from __future__ import annotations

from django import forms  # type: ignore


class LoginForm(forms.Form):
    email = forms.EmailField(
        error_messages={
            "required": "This field cannot be blank",
            "invalid": "Invalid email address",
        },
        widget=forms.EmailInput(attrs={"class": "form-control", "autocomplete": "email"}),
    )
    password = forms.CharField(
        strip=False,
        error_messages={"required": "This field cannot be blank"},
        widget=forms.PasswordInput(attrs={"class": "form-control", "autocomplete": "current-password"}),
    )
