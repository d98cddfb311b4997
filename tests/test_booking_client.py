"""
Tests for the offline-first booking client.
"""

import json

import httpx
import pytest

from barbershop.client import BookingClient, BookingRejected, OfflineQueue
from barbershop.client.offline_queue import OFFLINE_STATUS

BOOKING = {
    "name": "Ana",
    "phone": "71988887777",
    "email": "ana@example.com",
    "service": "corte",
    "date": "2099-03-02",
    "time": "09:30",
}


class FakeApi:
    """Mock transport that can be switched offline"""

    def __init__(self):
        self.online = True
        self.received = []
        self.reject_times = set()
        self.booked = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        if not self.online:
            raise httpx.ConnectError("network is unreachable", request=request)

        if request.url.path == "/api/bookings":
            payload = json.loads(request.content)
            self.received.append(payload)
            if payload["time"] in self.reject_times:
                return httpx.Response(400, json={"detail": "Time slot is already booked"})
            return httpx.Response(200, json={"success": True, "id": len(self.received), "message": "ok"})

        if request.url.path == "/api/available-times":
            return httpx.Response(
                200,
                json={
                    "date": request.url.params["date"],
                    "available": ["09:00"],
                    "booked": self.booked,
                    "blocked": ["11:00"],
                },
            )
        return httpx.Response(404)


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def queue(tmp_path):
    return OfflineQueue(tmp_path / "offline_bookings.json")


@pytest.fixture
def booking_client(api, queue):
    http = httpx.Client(base_url="http://testserver", transport=httpx.MockTransport(api.handler))
    with BookingClient("http://testserver", queue, http_client=http) as client:
        yield client


class TestCreateBooking:
    def test_online_booking(self, booking_client, api, queue):
        result = booking_client.create_booking(BOOKING)
        assert result.success and not result.offline
        assert result.id == 1
        assert len(queue) == 0

    def test_offline_booking_is_queued(self, booking_client, api, queue):
        api.online = False
        result = booking_client.create_booking(BOOKING)

        assert result.offline is True
        pending = queue.pending()
        assert len(pending) == 1
        assert pending[0]["status"] == OFFLINE_STATUS
        assert pending[0]["id"] == result.id
        assert "createdAt" in pending[0]

    def test_rejection_is_not_queued(self, booking_client, api, queue):
        api.reject_times.add("09:30")
        with pytest.raises(BookingRejected) as exc_info:
            booking_client.create_booking(BOOKING)
        assert exc_info.value.status_code == 400
        assert len(queue) == 0


class TestSync:
    def test_sync_sends_queue_and_clears_it(self, booking_client, api, queue):
        api.online = False
        booking_client.create_booking(BOOKING)
        booking_client.create_booking({**BOOKING, "time": "10:00"})

        api.online = True
        summary = booking_client.sync()

        assert summary.synced == 2
        assert summary.remaining == 0
        assert len(queue) == 0
        # Local bookkeeping fields never reach the API
        assert all("status" not in p and "createdAt" not in p for p in api.received)

    def test_rejected_bookings_are_dropped(self, booking_client, api, queue):
        api.online = False
        booking_client.create_booking(BOOKING)
        booking_client.create_booking({**BOOKING, "time": "10:00"})

        api.online = True
        api.reject_times.add("10:00")
        summary = booking_client.sync()

        assert summary.synced == 1
        assert summary.rejected == 1
        assert len(queue) == 0

    def test_sync_while_offline_keeps_queue(self, booking_client, api, queue):
        api.online = False
        booking_client.create_booking(BOOKING)

        summary = booking_client.sync()
        assert summary.synced == 0
        assert summary.remaining == 1
        assert len(queue) == 1

    def test_queue_survives_new_client(self, api, queue, tmp_path):
        api.online = False
        http = httpx.Client(base_url="http://testserver", transport=httpx.MockTransport(api.handler))
        BookingClient("http://testserver", queue, http_client=http).create_booking(BOOKING)

        reopened = OfflineQueue(tmp_path / "offline_bookings.json")
        assert len(reopened) == 1


class TestAvailableTimes:
    def test_online_uses_server(self, booking_client):
        body = booking_client.available_times("2099-03-02")
        assert body["offline"] is False
        assert body["available"] == ["09:00"]

    def test_offline_uses_default_schedule_minus_queue(self, booking_client, api):
        api.online = False
        booking_client.create_booking(BOOKING)

        body = booking_client.available_times("2099-03-02")
        assert body["offline"] is True
        assert "09:30" not in body["available"]
        assert "09:00" in body["available"]
        assert len(body["available"]) == 14

    def test_offline_remembers_last_known_times(self, booking_client, api):
        api.booked = ["14:00"]
        booking_client.available_times("2099-03-02")

        api.online = False
        body = booking_client.available_times("2099-03-02")
        assert body["booked"] == ["14:00"]
        assert body["blocked"] == ["11:00"]
        assert "14:00" not in body["available"]
        assert "11:00" not in body["available"]


class TestOfflineQueue:
    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "queue.json"
        path.write_text("{not json", encoding="utf-8")
        assert OfflineQueue(path).pending() == []

    def test_corrupt_file_is_kept_aside(self, tmp_path):
        path = tmp_path / "queue.json"
        path.write_text("{not json", encoding="utf-8")
        queue = OfflineQueue(path)

        queue.add(BOOKING)

        assert queue.corrupt_path.read_text(encoding="utf-8") == "{not json"
        assert len(queue) == 1

    def test_clear(self, queue):
        queue.add(BOOKING)
        queue.clear()
        assert len(queue) == 0
