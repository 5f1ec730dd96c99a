"""Bookings app package.

Walk-in check-in at the front desk. Creating a booking verifies that the
room is clean, prices the stay from the room's own nightly rate and marks
the room occupied in the same transaction, so a room can never be handed
to two guests at once.
"""
