"""
Tests for the owner notification webhook.
"""

import asyncio
import json

import httpx
import pytest

from barbershop.domain.settings.repository import SettingsRepository
from barbershop.models import Booking, BookingStatus
from barbershop.services.notification_service import (
    NotificationError,
    build_booking_payload,
    send_booking_notification,
)


def make_booking(**overrides):
    data = {
        "id": 7,
        "name": "Pedro",
        "phone": "(71) 98888-7777",
        "email": "pedro@example.com",
        "service": "combo",
        "barber": None,
        "date": "2099-03-02",
        "time": "15:00",
        "notes": None,
        "status": BookingStatus.PENDING,
    }
    data.update(overrides)
    return Booking(**data)


def run_with_transport(db_session, booking, handler):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await send_booking_notification(db_session, booking, client=client)

    return asyncio.run(run())


class TestBookingPayload:
    def test_defaults_for_empty_fields(self):
        payload = build_booking_payload(make_booking(), "BarberShop Elite")
        assert payload["barber"] == "Sem preferência"
        assert payload["notes"] == "Nenhuma"
        assert payload["_replyto"] == "pedro@example.com"
        assert payload["_subject"] == "Novo Agendamento - BarberShop Elite"
        assert "Pedro" in payload["message"]
        assert "15:00" in payload["message"]


class TestSendBookingNotification:
    def test_posts_to_webhook(self, db_session):
        requests = []

        def handler(request):
            requests.append(json.loads(request.content))
            return httpx.Response(200, json={"ok": True})

        assert run_with_transport(db_session, make_booking(barber="rafael"), handler) is True
        assert len(requests) == 1
        assert requests[0]["barber"] == "rafael"
        assert requests[0]["date"] == "2099-03-02"

    def test_skipped_when_disabled(self, db_session):
        SettingsRepository.upsert_many(db_session, {"email_notifications": "false"})

        def handler(request):
            raise AssertionError("webhook should not be called")

        assert run_with_transport(db_session, make_booking(), handler) is False

    def test_error_status_raises(self, db_session):
        def handler(request):
            return httpx.Response(500)

        with pytest.raises(NotificationError):
            run_with_transport(db_session, make_booking(), handler)

    def test_transport_error_raises(self, db_session):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NotificationError):
            run_with_transport(db_session, make_booking(), handler)
