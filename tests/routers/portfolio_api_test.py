"""HTTP tests for portfolio routes."""
import json
from datetime import date

import pytest

from finance_dashboard.db import PortfolioItem, User

NEW_ITEM = {
    "symbol": "nvda",
    "companyName": "NVIDIA Corporation",
    "shares": 4,
    "purchasePrice": 650.10,
    "purchaseDate": "2024-02-01",
}


class TestListPortfolio:
    def test_seeded_items_are_enriched(self, client):
        r = client.get("/api/portfolio")
        assert r.status_code == 200
        items = r.json()
        assert [i["symbol"] for i in items] == ["AAPL", "MSFT", "GOOGL"]
        aapl = items[0]
        assert aapl["userId"] == 1
        assert aapl["purchaseDate"] == "2023-01-15"
        assert aapl["currentPrice"] == 173.42
        assert aapl["totalValue"] == pytest.approx(1734.2)
        assert aapl["totalCost"] == pytest.approx(1505.0)
        assert aapl["profit"] == pytest.approx(229.2)
        assert aapl["percentChange"] == 15.23
        assert [i["percentChange"] for i in items[1:]] == [17.11, 26.89]

    def test_empty(self, empty_client):
        assert empty_client.get("/api/portfolio").json() == []


class TestSummary:
    def test_totals_match_items(self, client):
        items = client.get("/api/portfolio").json()
        summary = client.get("/api/portfolio/summary").json()
        value = sum(i["totalValue"] for i in items)
        cost = sum(i["totalCost"] for i in items)
        assert summary["itemCount"] == 3
        assert summary["totalValue"] == pytest.approx(value)
        assert summary["totalCost"] == pytest.approx(cost)
        assert summary["profit"] == pytest.approx(value - cost)
        assert summary["percentChange"] == round((value - cost) / cost * 100, 2)

    def test_empty(self, empty_client):
        summary = empty_client.get("/api/portfolio/summary").json()
        assert summary == {
            "totalValue": 0, "totalCost": 0, "profit": 0, "percentChange": 0, "itemCount": 0,
        }


class TestAddPortfolioItem:
    def test_created(self, client):
        r = client.post("/api/portfolio", json=NEW_ITEM)
        assert r.status_code == 201
        body = r.json()
        assert body["id"] == 4
        assert body["userId"] == 1
        assert body["symbol"] == "NVDA"
        assert body["purchaseDate"] == "2024-02-01"
        assert [i["symbol"] for i in client.get("/api/portfolio").json()][-1] == "NVDA"

    def test_user_id_in_body_is_ignored(self, client):
        body = client.post("/api/portfolio", json={**NEW_ITEM, "userId": 42}).json()
        assert body["userId"] == 1

    def test_new_id_exceeds_previous_ids(self, client):
        before = [i["id"] for i in client.get("/api/portfolio").json()]
        new_id = client.post("/api/portfolio", json=NEW_ITEM).json()["id"]
        assert all(new_id > i for i in before)

    @pytest.mark.parametrize(
        "override",
        [
            {"shares": 0},
            {"shares": -3},
            {"purchasePrice": 0},
            {"symbol": ""},
            {"companyName": "  "},
            {"purchaseDate": "not-a-date"},
        ],
    )
    def test_invalid_payload(self, client, override):
        r = client.post("/api/portfolio", json={**NEW_ITEM, **override})
        assert r.status_code == 400
        assert r.json()["detail"] == "Invalid request data"
        assert len(client.get("/api/portfolio").json()) == 3

    def test_missing_field(self, client):
        payload = {k: v for k, v in NEW_ITEM.items() if k != "shares"}
        assert client.post("/api/portfolio", json=payload).status_code == 400

    @pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
    @pytest.mark.parametrize("field", ["shares", "purchasePrice"])
    def test_non_finite_number_rejected(self, client, field, literal):
        # httpx refuses to encode non-finite floats, so send the raw JSON text
        fields = [
            f'"{key}": {literal if key == field else json.dumps(value)}'
            for key, value in NEW_ITEM.items()
        ]
        body = "{" + ", ".join(fields) + "}"
        r = client.post(
            "/api/portfolio", content=body, headers={"Content-Type": "application/json"}
        )
        assert r.status_code == 400
        assert len(client.get("/api/portfolio").json()) == 3
        assert client.get("/api/portfolio/summary").json()["totalValue"] is not None


class TestUpdatePortfolioItem:
    def test_partial_update(self, client):
        r = client.put("/api/portfolio/1", json={"shares": 20})
        assert r.status_code == 200
        body = r.json()
        assert body["shares"] == 20
        assert body["purchasePrice"] == 150.5
        assert body["companyName"] == "Apple Inc."

    def test_invalid_update_leaves_item_untouched(self, client):
        r = client.put("/api/portfolio/1", json={"shares": 5, "purchasePrice": -1})
        assert r.status_code == 400
        assert client.get("/api/portfolio").json()[0]["shares"] == 10

    @pytest.mark.parametrize("field", ["shares", "purchasePrice"])
    def test_non_finite_update_rejected(self, client, field):
        r = client.put(
            "/api/portfolio/1",
            content=f'{{"{field}": Infinity}}',
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 400
        item = client.get("/api/portfolio").json()[0]
        assert item["shares"] == 10
        assert item["purchasePrice"] == 150.5

    def test_missing(self, client):
        r = client.put("/api/portfolio/999", json={"shares": 1})
        assert r.status_code == 404
        assert r.json() == {"detail": "Portfolio item '999' not found"}

    def test_not_owner(self, client):
        item_id = _foreign_item_id(client)
        r = client.put(f"/api/portfolio/{item_id}", json={"shares": 1})
        assert r.status_code == 403
        assert r.json() == {"detail": "Unauthorized"}

    def test_non_integer_id(self, client):
        assert client.put("/api/portfolio/abc", json={"shares": 1}).status_code == 400


class TestDeletePortfolioItem:
    def test_deleted(self, client):
        r = client.delete("/api/portfolio/2")
        assert r.status_code == 204
        assert r.content == b""
        assert [i["id"] for i in client.get("/api/portfolio").json()] == [1, 3]

    def test_missing(self, client):
        assert client.delete("/api/portfolio/999").status_code == 404

    def test_deleted_twice(self, client):
        client.delete("/api/portfolio/1")
        assert client.delete("/api/portfolio/1").status_code == 404

    def test_not_owner(self, client):
        item_id = _foreign_item_id(client)
        assert client.delete(f"/api/portfolio/{item_id}").status_code == 403
        assert client.app.state.store.get_portfolio_item(item_id) is not None


def _foreign_item_id(client) -> int:
    """Add a holding owned by a second user directly to the app's store."""
    store = client.app.state.store
    other = store.create_user(User(username="other", password="x"))
    item = store.add_portfolio_item(
        PortfolioItem(
            user_id=other.id,
            symbol="JPM",
            company_name="JPMorgan Chase & Co.",
            shares=1,
            purchase_price=100.0,
            purchase_date=date(2024, 1, 1),
        )
    )
    return item.id
