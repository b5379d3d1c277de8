"""Users app package.

Administrator accounts that sign in to the reservation dashboard. Users
log in with their email address; the session is rotated on every login
and logout.
"""
