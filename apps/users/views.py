"""Session login and logout views."""

from __future__ import annotations

import logging

from django.contrib import messages  # type: ignore
from django.contrib.auth import authenticate, get_user_model, login, logout  # type: ignore
from django.shortcuts import render  # type: ignore
from django.views import View  # type: ignore

from apps.core.http import see_other

from .forms import LoginForm

logger = logging.getLogger(__name__)

User = get_user_model()


class LoginView(View):
    template_name = "users/login.html"

    def get(self, request):  # type: ignore
        return render(request, self.template_name, {"form": LoginForm()})

    def post(self, request):  # type: ignore
        form = LoginForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {"form": form})

        email = form.cleaned_data["email"]
        password = form.cleaned_data["password"]

        account = User.objects.filter(email__iexact=email).first()
        if account is not None and account.is_locked:
            logger.warning("Login attempt for locked account %s", email)
            messages.error(request, "Invalid login credentials")
            return see_other("login")

        user = authenticate(request, username=email, password=password)
        if user is None:
            if account is not None:
                account.register_failed_attempt()
            logger.info("Failed login for %s", email)
            messages.error(request, "Invalid login credentials")
            return see_other("login")

        if user.failed_login_attempts:
            user.unlock()

        # login() cycles the session key, preventing session fixation.
        login(request, user)
        logger.info("User %s logged in", user.pk)
        messages.success(request, "Logged in successfully")
        return see_other("home")


def logout_view(request):  # type: ignore
    user_id = request.user.pk
    # logout() flushes the session data and issues a new session key.
    logout(request)
    if user_id:
        logger.info("User %s logged out", user_id)
    return see_other("home")
