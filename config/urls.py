"""URL configuration for the bookings project.

The `urlpatterns` list routes URLs to views. Public pages and the booking
flow live at the site root, the administration dashboard under `/admin/`
and Django's model admin under `/django-admin/`.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore

urlpatterns = [
    path('django-admin/', admin.site.urls),
    # Application URLs
    path('', include('apps.core.urls')),
    path('', include('apps.rooms.urls')),
    path('', include('apps.reservations.urls')),
    path('user/', include('apps.users.urls')),
    path('admin/', include(('apps.dashboard.urls', 'dashboard'), namespace='dashboard')),
]

handler404 = 'apps.core.views.page_not_found'
handler500 = 'apps.core.views.server_error'
