"""Reservations app package.

This app encapsulates the reservation domain: reservations, the room
restrictions that occupy room nights (guest stays and owner blocks) and the
availability checks built on date range overlap. The guest-facing booking
flow keeps its draft reservation in the session between steps.
"""
