"""Pricing app package.

Effective-dated room-type rate card. Each room type has at most one active
price row at any time; changing a price closes the current row, opens a new
one and records the change in the pricing history, all in one transaction.
"""
