"""
Shared Kernel

This module contains base classes and utilities shared across the front desk
contexts (rooms, pricing, walk-in bookings).
"""
