"""Admin registration for reservations."""

from __future__ import annotations

from django.contrib import admin

from .models import Reservation, Restriction, RoomRestriction


class RoomRestrictionInline(admin.TabularInline):
    model = RoomRestriction
    extra = 0
    readonly_fields = ("start_date", "end_date", "room", "restriction", "created_at")


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "last_name",
        "first_name",
        "email",
        "room",
        "start_date",
        "end_date",
        "processed",
        "created_at",
    )
    list_filter = ("processed", "room", "start_date")
    search_fields = ("last_name", "first_name", "email", "phone")
    readonly_fields = ("created_at", "updated_at")
    inlines = [RoomRestrictionInline]


@admin.register(RoomRestriction)
class RoomRestrictionAdmin(admin.ModelAdmin):
    list_display = ("room", "start_date", "end_date", "restriction", "reservation")
    list_filter = ("restriction", "room")


@admin.register(Restriction)
class RestrictionAdmin(admin.ModelAdmin):
    list_display = ("id", "restriction_name")
