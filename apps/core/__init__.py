"""Core app package.

Holds the public pages (home, about, contact), the template helpers shared
by every page and the error handlers used by all domain apps.
"""
