"""Offline-first client for the public booking API"""

from .booking_client import BookingClient, BookingClientError, BookingRejected, BookingResult, SyncSummary
from .offline_queue import OfflineQueue

__all__ = [
    "BookingClient",
    "BookingClientError",
    "BookingRejected",
    "BookingResult",
    "OfflineQueue",
    "SyncSummary",
]
