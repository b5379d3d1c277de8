"""Rooms app package.

The catalogue of rentable rooms and their public pages.
"""
