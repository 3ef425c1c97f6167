"""HTTP tests for the FastAPI app."""

import pytest
from fastapi.testclient import TestClient

import db
import main
from routes import search as search_routes
from services.catalog_loader import CatalogLoadError


@pytest.fixture
def client(seeded_db):
    with TestClient(main.app) as c:
        yield c


@pytest.fixture
def broken_client(db_path, monkeypatch):
    def fail():
        raise CatalogLoadError("Unable to load catalog: database unavailable")

    monkeypatch.setattr(main, "load_catalog", fail)
    with TestClient(main.app) as c:
        yield c


class TestSearchEndpoint:
    def test_found(self, client):
        data = client.get("/search", params={"q": "whole"}).json()
        assert data["status"] == "found"
        assert data["category"] == "grocery"
        assert [r["id"] for r in data["results"]] == ["card-2", "card-1", "card-3"]
        assert [r["rate"] for r in data["results"]] == [5, 3, 0]
        assert data["best_card"]["card_name"] == "Grocery Plus"

    def test_not_found(self, client):
        resp = client.get("/search", params={"q": "Costco"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "not_found"
        assert data["results"] == []
        assert data["suggestion"] is None

    def test_blank_query(self, client):
        data = client.get("/search", params={"q": "  "}).json()
        assert data["status"] == "empty"

    def test_missing_query_param(self, client):
        assert client.get("/search").json()["status"] == "empty"

    def test_delay_still_returns_result(self, client, monkeypatch):
        monkeypatch.setattr(search_routes, "SEARCH_DELAY_MS", 1)
        assert client.get("/search", params={"q": "shell"}).json()["category"] == "gas"

    def test_catalog_not_loaded_yet(self, client):
        main.app.state.catalog = None
        main.app.state.catalog_error = None
        resp = client.get("/search", params={"q": "whole"})
        assert resp.status_code == 503
        assert resp.json() == {"error": "Catalog is not loaded yet"}

    def test_non_finite_rate_does_not_break_search(self, seeded_db):
        conn = db.get_db()
        try:
            conn.execute(
                "INSERT INTO cards (id, card_name, issuer, category_rates) VALUES (?, ?, ?, ?)",
                ("card-0", "Odd Card", "Bank", '{"grocery": NaN}'),
            )
        finally:
            conn.close()
        with TestClient(main.app) as c:
            resp = c.get("/search", params={"q": "whole"})
        assert resp.status_code == 200
        rates = [r["rate"] for r in resp.json()["results"]]
        assert rates == [5, 3, 0, 0]

    def test_catalog_unavailable(self, broken_client):
        resp = broken_client.get("/search", params={"q": "whole"})
        assert resp.status_code == 503
        assert "database unavailable" in resp.json()["error"]


class TestCatalogEndpoints:
    def test_status_loaded(self, client):
        assert client.get("/catalog/status").json() == {
            "loaded": True,
            "cards": 3,
            "stores": 3,
            "error": None,
        }

    def test_status_failed(self, broken_client):
        data = broken_client.get("/catalog/status").json()
        assert data["loaded"] is False
        assert "database unavailable" in data["error"]

    def test_popular_stores(self, client):
        stores = client.get("/stores/popular").json()
        assert len(stores) == 8
        assert stores[0] == {"name": "Whole Foods", "category": "grocery"}

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}
