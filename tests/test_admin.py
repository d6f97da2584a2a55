from caterease.core.config import settings
from caterease.db.init_db import init_db
from caterease.db.repositories import UserRepository


def _bootstrap_admin(db, monkeypatch):
    monkeypatch.setattr(settings, "FIRST_ADMIN_USERNAME", "root")
    monkeypatch.setattr(settings, "FIRST_ADMIN_EMAIL", "root@example.com")
    monkeypatch.setattr(settings, "FIRST_ADMIN_PASSWORD", "rootpass")
    init_db(db)


def test_init_db_creates_admin_once(db, monkeypatch):
    _bootstrap_admin(db, monkeypatch)
    init_db(db)

    admins = UserRepository(db).list(role="admin")
    assert [a.username for a in admins] == ["root"]


def test_init_db_without_admin_settings(db):
    init_db(db)

    assert UserRepository(db).count() == 0


def test_admin_endpoints(client, api, db, monkeypatch, marketplace):
    _bootstrap_admin(db, monkeypatch)
    api.place_order(marketplace["user_headers"], marketplace["caterer"]["id"], marketplace["menu"]["id"])

    login = client.post("/api/auth/login", json={"username": "root", "password": "rootpass"})
    assert login.status_code == 200
    headers = api.auth(login.json())

    stats = client.get("/api/admin/stats", headers=headers).json()
    assert stats["total_users"] == 3
    assert stats["total_caterers"] == 1
    assert stats["total_orders"] == 1
    assert stats["orders_by_status"]["pending"] == 1
    assert stats["orders_by_status"]["delivered"] == 0

    caterers = client.get("/api/admin/users", params={"role": "caterer"}, headers=headers).json()
    assert [u["username"] for u in caterers] == ["tasty"]

    pending = client.get("/api/admin/orders", params={"status": "pending"}, headers=headers).json()
    assert len(pending) == 1


def test_admin_endpoints_reject_non_admins(client, marketplace):
    for headers in (marketplace["user_headers"], marketplace["caterer_headers"]):
        assert client.get("/api/admin/stats", headers=headers).status_code == 403
