"""
Client for the public booking API with an offline fallback.

When the API cannot be reached, bookings are kept in an OfflineQueue and
availability is estimated locally from the default daily schedule. Calling
sync() once connectivity is back replays the queue.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from ..domain.scheduling.availability import DEFAULT_SCHEDULE, available_slots
from .offline_queue import OfflineQueue, to_api_payload

logger = logging.getLogger(__name__)


class BookingClientError(Exception):
    """The API answered with an unexpected server error"""

    def __init__(self, status_code: int, detail: Any = None):
        super().__init__(f"HTTP {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class BookingRejected(BookingClientError):
    """The API refused the booking (validation error or slot conflict)"""


@dataclass
class BookingResult:
    success: bool
    id: Optional[int] = None
    message: str = ""
    offline: bool = False


@dataclass
class SyncSummary:
    synced: int = 0
    rejected: int = 0
    remaining: int = 0


def _error_detail(response: httpx.Response) -> Any:
    try:
        return response.json().get("detail")
    except ValueError:
        return response.text


class BookingClient:
    def __init__(
        self,
        base_url: str,
        queue: OfflineQueue,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self.queue = queue
        self.http = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        # Last known booked/blocked times per date, used while offline
        self._last_known: dict[str, dict[str, list[str]]] = {}

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _post_booking(self, payload: dict[str, Any]) -> httpx.Response:
        return self.http.post("/api/bookings", json=payload)

    def create_booking(self, booking: dict[str, Any]) -> BookingResult:
        """
        Submit a booking. Queues it locally when the API is unreachable.

        Raises:
            BookingRejected: the API refused the booking (4xx)
            BookingClientError: the API failed (5xx)
        """
        try:
            response = self._post_booking(to_api_payload(booking))
        except httpx.TransportError as e:
            logger.warning(f"⚠️ API unreachable ({e}), saving booking offline")
            entry = self.queue.add(booking)
            return BookingResult(
                success=True,
                id=entry["id"],
                message="No connection. Booking saved locally and will be sent later.",
                offline=True,
            )

        if response.is_client_error:
            raise BookingRejected(response.status_code, _error_detail(response))
        if not response.is_success:
            raise BookingClientError(response.status_code, _error_detail(response))

        body = response.json()
        return BookingResult(success=True, id=body.get("id"), message=body.get("message", ""))

    def sync(self) -> SyncSummary:
        """
        Replay every queued booking.

        Accepted and rejected bookings leave the queue; bookings that hit a
        transport or server error stay queued for the next attempt.
        """
        pending = self.queue.pending()
        summary = SyncSummary()
        if not pending:
            return summary

        logger.info(f"🔄 Syncing {len(pending)} offline booking(s)")
        still_pending = []
        for entry in pending:
            try:
                response = self._post_booking(to_api_payload(entry))
            except httpx.TransportError as e:
                logger.error(f"❌ Sync failed for offline booking {entry.get('id')}: {e}")
                still_pending.append(entry)
                continue

            if response.is_success:
                summary.synced += 1
                logger.info(f"✅ Offline booking synced: {entry.get('name')}")
            elif response.is_client_error:
                summary.rejected += 1
                logger.warning(
                    f"⚠️ Offline booking {entry.get('id')} rejected: {_error_detail(response)}"
                )
            else:
                still_pending.append(entry)

        self.queue.replace(still_pending)
        summary.remaining = len(still_pending)
        return summary

    def available_times(self, date: str) -> dict[str, Any]:
        """Ask the API for free slots, estimating locally when offline"""
        try:
            response = self.http.get("/api/available-times", params={"date": date})
        except httpx.TransportError as e:
            logger.info(f"Using offline availability for {date} ({e})")
            return self._offline_available_times(date)

        if response.is_client_error:
            raise BookingRejected(response.status_code, _error_detail(response))
        if not response.is_success:
            raise BookingClientError(response.status_code, _error_detail(response))

        data = response.json()
        self._last_known[date] = {
            "booked": list(data.get("booked", [])),
            "blocked": list(data.get("blocked", [])),
        }
        return {**data, "offline": False}

    def _offline_available_times(self, date: str) -> dict[str, Any]:
        known = self._last_known.get(date, {"booked": [], "blocked": []})
        booked = sorted(set(known["booked"]) | set(self.queue.times_for_date(date)))
        blocked = sorted(set(known["blocked"]))
        return {
            "date": date,
            "available": available_slots(DEFAULT_SCHEDULE.slots(), booked, blocked),
            "booked": booked,
            "blocked": blocked,
            "offline": True,
        }
