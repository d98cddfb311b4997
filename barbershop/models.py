from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.sql import func

from .database import Base


class BookingStatus:
    """Booking status values as shown to customers and staff"""

    PENDING = "Pendente"
    CONFIRMED = "Confirmado"
    COMPLETED = "Concluído"
    CANCELLED = "Cancelado"

    ALL = (PENDING, CONFIRMED, COMPLETED, CANCELLED)


class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    email = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Setting(Base):
    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, index=True)
    key_name = Column(String(100), unique=True, index=True, nullable=False)
    key_value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    service = Column(String(100), nullable=False)
    barber = Column(String(100), nullable=True)
    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD
    time = Column(String(5), nullable=False)  # HH:MM
    notes = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=BookingStatus.PENDING)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        # One active booking per slot; cancelled rows free the slot again
        Index(
            "uq_bookings_active_slot",
            "date",
            "time",
            unique=True,
            sqlite_where=text(f"status != '{BookingStatus.CANCELLED}'"),
            postgresql_where=text(f"status != '{BookingStatus.CANCELLED}'"),
        ),
    )


class BlockedTime(Base):
    __tablename__ = "blocked_times"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(String(10), nullable=False, index=True)
    time = Column(String(5), nullable=False)
    reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (UniqueConstraint("date", "time", name="uq_blocked_times_slot"),)
