"""Bookings app package.

This app encapsulates the booking core: availability search across hotels,
the ordered booking rules, and the transaction that reserves rooms without
ever letting two bookings hold the same room on overlapping dates.
"""
