"""Rooms app package.

Persisted room inventory of the hotel: identity, type, floor, capacity,
features, the denormalized per-room base price and the housekeeping status
that walk-in check-in flips from CLEAN to OCCUPIED.
"""
