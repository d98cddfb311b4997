"""Settings repository - Database operations for key/value settings"""

from sqlalchemy.orm import Session

from ...models import Setting


class SettingsRepository:
    """Repository for settings database operations"""

    @staticmethod
    def get_all(db: Session) -> dict[str, str]:
        """Get all settings as a flat key -> value map"""
        return {s.key_name: s.key_value for s in db.query(Setting).all()}

    @staticmethod
    def get_many(db: Session, keys: list[str]) -> dict[str, str]:
        """Get a subset of settings by key"""
        rows = db.query(Setting).filter(Setting.key_name.in_(keys)).all()
        return {s.key_name: s.key_value for s in rows}

    @staticmethod
    def upsert_many(db: Session, values: dict[str, str]) -> None:
        """Insert or replace every key/value pair in one transaction"""
        existing = {
            s.key_name: s
            for s in db.query(Setting).filter(Setting.key_name.in_(list(values))).all()
        }
        for key, value in values.items():
            if key in existing:
                existing[key].key_value = value
            else:
                db.add(Setting(key_name=key, key_value=value))
        db.commit()

    @staticmethod
    def insert_missing(db: Session, defaults: dict[str, str]) -> int:
        """Insert defaults for keys that are not stored yet. Returns the number inserted."""
        present = {row[0] for row in db.query(Setting.key_name).all()}
        inserted = 0
        for key, value in defaults.items():
            if key not in present:
                db.add(Setting(key_name=key, key_value=value))
                inserted += 1
        db.commit()
        return inserted
