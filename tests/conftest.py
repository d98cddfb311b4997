import os

# Must be set before the barbershop package reads its configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DEFAULT_ADMIN_USERNAME"] = "admin"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "admin123"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from barbershop.database import Base, get_db
from barbershop.main import app
from barbershop.seed import seed_defaults
from barbershop.services import notification_service

FUTURE_DATE = "2099-03-02"


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSessionLocal()
    seed_defaults(session)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def sent_notifications(monkeypatch):
    """Replace the webhook call and record the bookings it would have sent"""
    sent = []

    async def fake_send(db, booking, client=None):
        sent.append({"id": booking.id, "date": booking.date, "time": booking.time})
        return True

    monkeypatch.setattr(notification_service, "send_booking_notification", fake_send)
    return sent


@pytest.fixture
def client(db_session, sent_notifications):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def booking_payload():
    return {
        "name": "João Silva",
        "phone": "71988887777",
        "email": "Joao@Example.com",
        "service": "corte",
        "barber": "carlos",
        "date": FUTURE_DATE,
        "time": "10:00",
        "notes": "Primeira visita",
    }
