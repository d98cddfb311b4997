"""Booking repository - Database operations for bookings"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Booking, BookingStatus


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def list_bookings(
        db: Session,
        date: Optional[str] = None,
        status: Optional[str] = None,
    ) -> list[Booking]:
        """List bookings, newest slot first, with optional date/status filters"""
        query = db.query(Booking)

        if date:
            query = query.filter(Booking.date == date)

        if status:
            query = query.filter(Booking.status == status)

        return query.order_by(Booking.date.desc(), Booking.time.desc()).all()

    @staticmethod
    def get_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def get_booked_times_for_date(db: Session, date: str) -> list[str]:
        """Times held by active (non-cancelled) bookings on a date"""
        rows = (
            db.query(Booking.time)
            .filter(Booking.date == date, Booking.status != BookingStatus.CANCELLED)
            .order_by(Booking.time)
            .all()
        )
        return [row[0] for row in rows]

    @staticmethod
    def is_slot_taken(
        db: Session, date: str, time: str, exclude_id: Optional[int] = None
    ) -> bool:
        query = db.query(Booking.id).filter(
            Booking.date == date,
            Booking.time == time,
            Booking.status != BookingStatus.CANCELLED,
        )
        if exclude_id is not None:
            query = query.filter(Booking.id != exclude_id)
        return query.first() is not None

    @staticmethod
    def create_booking(db: Session, **booking_data) -> Booking:
        """Insert a booking. Raises IntegrityError when the slot is already held."""
        booking = Booking(**booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def update_booking(db: Session, booking: Booking, **updates) -> Booking:
        for key, value in updates.items():
            if hasattr(booking, key):
                setattr(booking, key, value)

        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def count_by_status(db: Session) -> dict[str, int]:
        rows = db.query(Booking.status, func.count(Booking.id)).group_by(Booking.status).all()
        return {status: count for status, count in rows}

    @staticmethod
    def count_active_on(db: Session, date: str) -> int:
        return (
            db.query(func.count(Booking.id))
            .filter(Booking.date == date, Booking.status != BookingStatus.CANCELLED)
            .scalar()
        )

    @staticmethod
    def count_active_from(db: Session, date: str) -> int:
        """Active (non-cancelled) bookings on or after the given date"""
        return (
            db.query(func.count(Booking.id))
            .filter(Booking.date >= date, Booking.status != BookingStatus.CANCELLED)
            .scalar()
        )
