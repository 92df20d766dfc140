"""
Tests for the calculator API routes.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from calcdeck.api import deps
from calcdeck.api.main import app as main_app
from calcdeck.api.routes import calculators
from calcdeck.tables import TableCatalog

# --- Test Setup ---


@pytest.fixture
def app(catalog: TableCatalog) -> FastAPI:
    """Test FastAPI app with calculator routes."""
    app = FastAPI()
    app.include_router(calculators.router, prefix="/calculators")

    app.dependency_overrides[deps.get_catalog] = lambda: catalog

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)


# --- Health ---


class TestHealth:
    def test_health(self) -> None:
        with TestClient(main_app) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "calcdeck"}

    def test_main_app_mounts_calculators(self) -> None:
        with TestClient(main_app) as client:
            response = client.get("/api/calculators")

        assert response.status_code == 200
        assert response.json()["count"] == 20


# --- Listing ---


class TestListing:
    def test_list(self, client: TestClient) -> None:
        response = client.get("/calculators")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == len(data["calculators"]) == 20
        first = data["calculators"][0]
        assert first == {
            "slug": "cd-interest",
            "title": "CD Interest Calculator",
            "category": "financial",
        }

    def test_detail_includes_input_schema(self, client: TestClient) -> None:
        response = client.get("/calculators/tdee")

        assert response.status_code == 200
        data = response.json()
        assert data["category"] == "health"
        assert "activity_level" in data["input_schema"]["properties"]

    def test_detail_unknown(self, client: TestClient) -> None:
        response = client.get("/calculators/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "Calculator not found"


# --- Running ---


class TestRun:
    def test_success(self, client: TestClient) -> None:
        response = client.post(
            "/calculators/cd-interest",
            json={"principal": 10000, "rate": 4.5, "term": 1, "compounding": "daily"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["slug"] == "cd-interest"
        assert data["result"]["apy"] == pytest.approx(4.6025, abs=1e-3)
        assert data["result"]["recommendations"][0]["category"] == "Term Selection"

    def test_table_driven_calculator(self, client: TestClient) -> None:
        response = client.post(
            "/calculators/va-disability",
            json={"ratings": [{"percentage": 50}, {"percentage": 30}]},
        )

        assert response.status_code == 200
        assert response.json()["result"]["combined_rating"] == 70

    def test_nested_and_tuple_results(self, client: TestClient) -> None:
        response = client.post(
            "/calculators/poker-odds",
            json={
                "hole_cards": [{"rank": "A", "suit": "hearts"}, {"rank": "K", "suit": "spades"}]
            },
        )

        assert response.status_code == 200
        outs = response.json()["result"]["outs"]
        assert outs["count"] == 6
        assert {"rank": "A", "suit": "spades"} in outs["cards"]

    def test_calculation_errors_return_400(self, client: TestClient) -> None:
        response = client.post(
            "/calculators/simpsons-rule",
            json={"expression": "x^2", "lower_bound": 0, "upper_bound": 1, "intervals": 0},
        )

        assert response.status_code == 400
        errors = response.json()["detail"]["errors"]
        assert errors == [
            {
                "code": "division_by_zero",
                "message": "intervals must not be zero",
                "field": "intervals",
            }
        ]

    def test_unparsable_expression_returns_400(self, client: TestClient) -> None:
        response = client.post("/calculators/integral", json={"expression": "x +* 2"})

        assert response.status_code == 400
        assert response.json()["detail"]["errors"][0]["code"] == "unparsable_expression"

    def test_out_of_range_bounds_return_400(self, client: TestClient) -> None:
        response = client.post(
            "/calculators/simpsons-rule",
            json={"expression": "1", "lower_bound": 0, "upper_bound": 1e100, "intervals": 2},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["errors"][0]["field"] == "upper_bound"

    def test_payload_shape_returns_422(self, client: TestClient) -> None:
        response = client.post("/calculators/mortgage", json={"price": "a lot"})

        assert response.status_code == 422
        assert response.json()["detail"]

    def test_unknown_calculator_returns_404(self, client: TestClient) -> None:
        response = client.post("/calculators/nope", json={})

        assert response.status_code == 404

    def test_uses_overridden_catalog(self, app: FastAPI, tables_dir) -> None:
        (tables_dir / "words.yaml").write_text(
            "kind: word_list\nname: wordle\nwords: [apple, grape]\n"
        )
        app.dependency_overrides[deps.get_catalog] = lambda: TableCatalog(tables_dir)
        client = TestClient(app)

        response = client.post("/calculators/wordle", json={"present_letters": ["p"]})

        assert response.status_code == 200
        assert response.json()["result"]["suggestions"] == ["apple", "grape"]
