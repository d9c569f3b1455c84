"""
Passenger service.

Manages passenger records and the notifications sent to passengers when a
flight they are booked on is cancelled.
"""

__version__ = "0.1.0"
