"""Admin repository - Database operations for admin accounts"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Admin


class AdminRepository:
    @staticmethod
    def get_by_username(db: Session, username: str) -> Optional[Admin]:
        return db.query(Admin).filter(Admin.username == username).first()

    @staticmethod
    def create_admin(db: Session, username: str, password_hash: str, email: str) -> Admin:
        admin = Admin(username=username, password=password_hash, email=email)
        db.add(admin)
        db.commit()
        db.refresh(admin)
        return admin
