"""Tests for the HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sfas.api import create_app
from sfas.config import AppConfig
from sfas.db.connection import init_db


@pytest.fixture
def config(db_path):
    return AppConfig(DB_PATH=db_path)


@pytest.fixture
def client(config):
    with TestClient(create_app(config)) as test_client:
        yield test_client


INVESTMENT = {"name": "Index fund", "principal": 10000.0, "annual_rate": 7.5}


class TestLifespan:
    def test_startup_creates_schema(self, client, db_path):
        assert db_path.exists()
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_restart_keeps_data(self, config):
        with TestClient(create_app(config)) as first:
            first.post("/api/investments", json=INVESTMENT)
        with TestClient(create_app(config)) as second:
            assert len(second.get("/api/investments").json()) == 1


class TestInvestments:
    def test_create_returns_201_and_id(self, client):
        resp = client.post("/api/investments", json=INVESTMENT)
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Investment created successfully"
        assert isinstance(body["id"], int)

    def test_list_returns_created(self, client):
        client.post("/api/investments", json=INVESTMENT)
        [inv] = client.get("/api/investments").json()
        assert inv["name"] == "Index fund"
        assert inv["principal"] == 10000.0
        assert inv["annual_rate"] == 7.5
        assert inv["monthly_addition_enabled"] is True
        assert inv["created_at"] is not None

    def test_update(self, client):
        new_id = client.post("/api/investments", json=INVESTMENT).json()["id"]
        resp = client.put(
            f"/api/investments/{new_id}",
            json={
                **INVESTMENT,
                "principal": 12000.0,
                "monthly_addition_enabled": False,
            },
        )
        assert resp.status_code == 200
        assert resp.json() == {"message": "Investment updated successfully"}
        [inv] = client.get("/api/investments").json()
        assert inv["principal"] == 12000.0
        assert inv["monthly_addition_enabled"] is False

    def test_update_missing_id_is_ok_and_creates_nothing(self, client):
        resp = client.put("/api/investments/404", json=INVESTMENT)
        assert resp.status_code == 200
        assert client.get("/api/investments").json() == []

    def test_delete(self, client):
        new_id = client.post("/api/investments", json=INVESTMENT).json()["id"]
        resp = client.delete(f"/api/investments/{new_id}")
        assert resp.json() == {"message": "Investment deleted successfully"}
        assert client.get("/api/investments").json() == []

    def test_invalid_id_is_bad_request(self, client):
        resp = client.delete("/api/investments/abc")
        assert resp.status_code == 400
        assert resp.json()["error"] == "Invalid request"

    def test_missing_field_is_bad_request(self, client):
        resp = client.post("/api/investments", json={"name": "x"})
        assert resp.status_code == 400


class TestBonuses:
    def test_list_sorted_by_month(self, client):
        for month in (3, 1, 2):
            client.post(
                "/api/bonuses", json={"name": f"m{month}", "amount": 10, "month": month}
            )
        months = [b["month"] for b in client.get("/api/bonuses").json()]
        assert months == [1, 2, 3]

    def test_amount_rounded(self, client):
        client.post("/api/bonuses", json={"name": "Q1", "amount": 1000.005, "month": 1})
        [bonus] = client.get("/api/bonuses").json()
        assert bonus["amount"] == 1000.01

    def test_rounding_can_be_disabled(self, db_path):
        config = AppConfig(DB_PATH=db_path, ROUND_BONUS_AMOUNTS=False)
        with TestClient(create_app(config)) as client:
            client.post(
                "/api/bonuses", json={"name": "Q1", "amount": 1000.005, "month": 1}
            )
            [bonus] = client.get("/api/bonuses").json()
        assert bonus["amount"] == 1000.005

    def test_update_and_delete(self, client):
        resp = client.post("/api/bonuses", json={"name": "a", "amount": 1, "month": 1})
        new_id = resp.json()["id"]

        resp = client.put(
            f"/api/bonuses/{new_id}", json={"name": "b", "amount": 2, "month": 2}
        )
        assert resp.json() == {"message": "Bonus updated successfully"}
        [bonus] = client.get("/api/bonuses").json()
        assert (bonus["name"], bonus["amount"], bonus["month"]) == ("b", 2.0, 2)

        resp = client.delete(f"/api/bonuses/{new_id}")
        assert resp.json() == {"message": "Bonus deleted successfully"}
        assert client.get("/api/bonuses").json() == []

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "a", "amount": 0, "month": 1},
            {"name": "a", "amount": 10, "month": 0},
            {"name": "a", "amount": 10, "month": 13},
            {"name": "", "amount": 10, "month": 1},
        ],
    )
    def test_rejects_invalid_body(self, client, body):
        assert client.post("/api/bonuses", json=body).status_code == 400

    def test_huge_amount_is_stored_and_listed(self, client):
        resp = client.post(
            "/api/bonuses", json={"name": "windfall", "amount": 1e27, "month": 1}
        )
        assert resp.status_code == 201
        [bonus] = client.get("/api/bonuses").json()
        assert bonus["amount"] == 1e27

    def test_rejects_infinite_amount(self, client):
        # 1e400 overflows to inf when decoded
        resp = client.post(
            "/api/bonuses",
            content='{"name": "a", "amount": 1e400, "month": 1}',
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert client.get("/api/bonuses").json() == []


class TestSettings:
    def test_get_defaults(self, client):
        assert client.get("/api/settings").json() == {"id": 1, "monthly_addition": 0.0}

    def test_update_ignores_supplied_id(self, client, db_path):
        resp = client.put("/api/settings", json={"id": 999, "monthly_addition": 250.0})
        assert resp.json() == {"message": "Settings updated successfully"}
        assert client.get("/api/settings").json() == {
            "id": 1,
            "monthly_addition": 250.0,
        }

        conn = init_db(db_path)
        count = conn.execute("SELECT COUNT(*) FROM settings").fetchone()[0]
        conn.close()
        assert count == 1

    def test_missing_row_is_server_error(self, client, db_path):
        conn = init_db(db_path)
        conn.execute("DELETE FROM settings")
        conn.close()

        resp = client.get("/api/settings")
        assert resp.status_code == 500
        assert "not found" in resp.json()["error"]
