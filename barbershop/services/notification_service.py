"""
Owner notification for new bookings.

Email delivery is handled by an external form-to-email service; we only POST
the booking to its webhook endpoint.
"""

import logging
from typing import Optional

import httpx
from sqlalchemy.orm import Session

from ..config import NOTIFICATION_TIMEOUT, NOTIFICATION_WEBHOOK_URL
from ..domain.settings.repository import SettingsRepository
from ..models import Booking

logger = logging.getLogger(__name__)

NO_BARBER_PREFERENCE = "Sem preferência"
NO_NOTES = "Nenhuma"


class NotificationError(Exception):
    """The notification webhook could not be reached or refused the message"""


def build_booking_payload(booking: Booking, business_name: str) -> dict:
    barber = booking.barber or NO_BARBER_PREFERENCE
    notes = booking.notes or NO_NOTES

    message = (
        "🔔 NOVO AGENDAMENTO RECEBIDO!\n\n"
        f"👤 Cliente: {booking.name}\n"
        f"📞 Telefone: {booking.phone}\n"
        f"📧 Email: {booking.email}\n"
        f"✂️ Serviço: {booking.service}\n"
        f"👨‍💼 Profissional: {barber}\n"
        f"📅 Data: {booking.date}\n"
        f"⏰ Horário: {booking.time}\n"
        f"📝 Observações: {notes}\n\n"
        f"Status: {booking.status}"
    )

    return {
        "_replyto": booking.email,
        "_subject": f"Novo Agendamento - {business_name}",
        "name": booking.name,
        "phone": booking.phone,
        "email": booking.email,
        "service": booking.service,
        "barber": barber,
        "date": booking.date,
        "time": booking.time,
        "notes": notes,
        "message": message,
    }


async def send_booking_notification(
    db: Session,
    booking: Booking,
    client: Optional[httpx.AsyncClient] = None,
) -> bool:
    """
    Tell the shop owner about a new booking.

    Returns False when notifications are switched off in settings, True once
    the webhook accepted the message.

    Raises:
        NotificationError: on transport failure or a non-2xx response
    """
    settings = SettingsRepository.get_many(db, ["email_notifications", "business_name"])
    if settings.get("email_notifications") != "true":
        logger.info("Email notifications disabled, skipping booking notification")
        return False

    payload = build_booking_payload(booking, settings.get("business_name") or "BarberShop")

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=NOTIFICATION_TIMEOUT) as http_client:
                response = await http_client.post(NOTIFICATION_WEBHOOK_URL, json=payload)
        else:
            response = await client.post(NOTIFICATION_WEBHOOK_URL, json=payload)
    except httpx.HTTPError as e:
        raise NotificationError(f"Notification webhook unreachable: {e}") from e

    if not response.is_success:
        raise NotificationError(f"Notification webhook returned HTTP {response.status_code}")

    logger.info(f"📧 Booking notification sent for booking {booking.id}")
    return True
