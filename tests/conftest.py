import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from caterease.db import models  # noqa: F401
from caterease.db.base import Base, build_engine, get_db
from caterease.main import app


@pytest.fixture
def engine():
    # single-threaded tests share one in-memory connection
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class CaterEaseApi:
    """Small helper around the test client for building fixtures through the API."""

    def __init__(self, client):
        self.client = client

    @staticmethod
    def auth(body):
        return {"Authorization": f"Bearer {body['access_token']}"}

    def register_user(self, username="alice", email=None, **extra):
        payload = {
            "username": username,
            "email": email or f"{username}@example.com",
            "password": "secret123",
            "confirm_password": "secret123",
            "name": username.title(),
            "phone": "9876543210",
            **extra,
        }
        resp = self.client.post("/api/auth/register", json=payload)
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return self.auth(body), body["user"]

    def register_caterer(self, username="tasty", min_plate=50, max_plate=500, **extra):
        payload = {
            "username": username,
            "email": f"{username}@example.com",
            "password": "secret123",
            "confirm_password": "secret123",
            "name": username.title(),
            "phone": "9876543210",
            "business_name": f"{username.title()} Caterers",
            "description": "Bulk catering",
            "location": "MG Road",
            "city": "Bangalore",
            "state": "Karnataka",
            "min_plate": min_plate,
            "max_plate": max_plate,
            "specialties": ["south indian"],
            "event_types": ["wedding", "corporate"],
            **extra,
        }
        resp = self.client.post("/api/auth/register-caterer", json=payload)
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return self.auth(body), body["caterer"]

    def create_menu(self, headers, price_per_plate=100, **extra):
        payload = {
            "name": "Wedding Feast",
            "meal_type": "lunch",
            "price_per_plate": price_per_plate,
            "items": ["rice", "sambar", "payasam"],
            "is_vegetarian": True,
            **extra,
        }
        resp = self.client.post("/api/caterers/menus", json=payload, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    def order_payload(self, caterer_id, menu_id, no_of_plates=100, **extra):
        return {
            "caterer_id": caterer_id,
            "menu_id": menu_id,
            "event_type": "wedding",
            "no_of_plates": no_of_plates,
            "event_date": "2026-12-12",
            "event_time": "12:30",
            "address": "12 Temple Street",
            "city": "Bangalore",
            "state": "Karnataka",
            **extra,
        }

    def place_order(self, headers, caterer_id, menu_id, no_of_plates=100, **extra):
        resp = self.client.post(
            "/api/orders",
            json=self.order_payload(caterer_id, menu_id, no_of_plates, **extra),
            headers=headers,
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    def set_status(self, headers, order_id, status):
        return self.client.put(f"/api/orders/{order_id}/status", json={"status": status}, headers=headers)

    def deliver(self, headers, order_id):
        for status in ("confirmed", "preparing", "ready", "delivered"):
            resp = self.set_status(headers, order_id, status)
            assert resp.status_code == 200, resp.text
        return resp.json()

    def review(self, headers, order_id, rating, comment=None):
        return self.client.post(
            f"/api/orders/{order_id}/reviews",
            json={"rating": rating, "comment": comment},
            headers=headers,
        )


@pytest.fixture
def api(client):
    return CaterEaseApi(client)


@pytest.fixture
def marketplace(api):
    """One caterer with a menu and one registered customer."""
    caterer_headers, caterer = api.register_caterer()
    menu = api.create_menu(caterer_headers)
    user_headers, user = api.register_user()
    return {
        "caterer_headers": caterer_headers,
        "caterer": caterer,
        "menu": menu,
        "user_headers": user_headers,
        "user": user,
    }
