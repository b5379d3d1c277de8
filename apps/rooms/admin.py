"""Admin registration for rooms."""

from __future__ import annotations

from django.contrib import admin

from .models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("room_name", "slug", "created_at")
    search_fields = ("room_name", "slug")
    prepopulated_fields = {"slug": ("room_name",)}
    readonly_fields = ("created_at", "updated_at")
