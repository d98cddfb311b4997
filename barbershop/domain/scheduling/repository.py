"""Scheduling repository - Database operations for blocked times"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import BlockedTime


class BlockedTimeRepository:
    """Repository for blocked time database operations"""

    @staticmethod
    def list_blocked(db: Session, date: Optional[str] = None) -> list[BlockedTime]:
        """List blocked times, optionally for a single date"""
        query = db.query(BlockedTime)
        if date:
            query = query.filter(BlockedTime.date == date)
        return query.order_by(BlockedTime.date, BlockedTime.time).all()

    @staticmethod
    def get_blocked_times_for_date(db: Session, date: str) -> list[str]:
        rows = (
            db.query(BlockedTime.time)
            .filter(BlockedTime.date == date)
            .order_by(BlockedTime.time)
            .all()
        )
        return [row[0] for row in rows]

    @staticmethod
    def is_blocked(db: Session, date: str, time: str) -> bool:
        return (
            db.query(BlockedTime.id)
            .filter(BlockedTime.date == date, BlockedTime.time == time)
            .first()
            is not None
        )

    @staticmethod
    def get_by_id(db: Session, blocked_id: int) -> Optional[BlockedTime]:
        return db.query(BlockedTime).filter(BlockedTime.id == blocked_id).first()

    @staticmethod
    def create(db: Session, date: str, time: str, reason: str) -> BlockedTime:
        """Insert a blocked time. Raises IntegrityError when the slot is already blocked."""
        blocked = BlockedTime(date=date, time=time, reason=reason)
        db.add(blocked)
        db.commit()
        db.refresh(blocked)
        return blocked

    @staticmethod
    def delete(db: Session, blocked: BlockedTime) -> None:
        db.delete(blocked)
        db.commit()
