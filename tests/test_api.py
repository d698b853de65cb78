"""
FastAPI endpoint tests for the Spelled Numbers API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

from api import app
from fastapi.testclient import TestClient

from spelled_numbers import __version__
from spelled_numbers.locales import PORTUGUESE

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["locales"] == ["pt"]
        assert data["descriptions"]["pt"] == PORTUGUESE.description


class TestConvertEndpoint:
    def test_integer(self) -> None:
        resp = client.post("/convert", json={"number": 1234})
        assert resp.status_code == 200
        data = resp.json()
        assert data["text"] == "mil e duzentos e trinta e quatro"
        assert data["is_supported"] is True
        assert data["scale_mode"] == "long"
        assert data["category"] == 3

    def test_decimal_string_keeps_leading_zeros(self) -> None:
        data = client.post("/convert", json={"number": "0.05"}).json()
        assert data["text"] == "zero vírgula zero cinco"
        assert data["number"] == "0.05"

    def test_short_scale(self) -> None:
        data = client.post("/convert", json={"number": 10**9, "short_scale": True}).json()
        assert data["text"] == "um bilião"
        assert data["scale_mode"] == "short"

    def test_unsupported_is_not_an_error(self) -> None:
        resp = client.post("/convert", json={"number": "1" * 16})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_supported"] is False
        assert data["text"] == PORTUGUESE.unsupported
        assert data["category"] is None

    def test_negative_returns_422(self) -> None:
        resp = client.post("/convert", json={"number": -5})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "NEGATIVE_NUMBER"

    def test_malformed_returns_422(self) -> None:
        resp = client.post("/convert", json={"number": "twelve"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_NUMBER"

    def test_unknown_locale_returns_422(self) -> None:
        resp = client.post("/convert", json={"number": 1, "locale": "xx"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "UNKNOWN_LOCALE"

    def test_missing_number_returns_422(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422


class TestConvertPathEndpoint:
    def test_path_number(self) -> None:
        data = client.get("/convert/2000").json()
        assert data["text"] == "dois mil"

    def test_path_decimal(self) -> None:
        data = client.get("/convert/5.50").json()
        assert data["text"] == "cinco vírgula cinquenta"

    def test_query_short_scale(self) -> None:
        data = client.get("/convert/1000000000000", params={"short_scale": "true"}).json()
        assert data["text"] == "um trilião"

    def test_huge_exponent_is_unsupported(self) -> None:
        resp = client.get("/convert/1e999999999")
        assert resp.status_code == 200
        assert resp.json()["is_supported"] is False
        assert resp.json()["text"] == PORTUGUESE.unsupported


class TestBatchEndpoint:
    def test_results_keep_request_order(self) -> None:
        resp = client.post("/convert/batch", json={"numbers": [1, 100, 150, "0.5"]})
        assert resp.status_code == 200
        texts = [r["text"] for r in resp.json()["results"]]
        assert texts == ["um", "cem", "cento e cinquenta", "zero vírgula cinco"]

    def test_scale_applies_to_every_item(self) -> None:
        resp = client.post(
            "/convert/batch", json={"numbers": [10**9, 2 * 10**9], "short_scale": True}
        )
        texts = [r["text"] for r in resp.json()["results"]]
        assert texts == ["um bilião", "dois biliões"]

    def test_any_negative_rejects_batch(self) -> None:
        resp = client.post("/convert/batch", json={"numbers": [1, -1]})
        assert resp.status_code == 422

    def test_empty_batch_rejected(self) -> None:
        resp = client.post("/convert/batch", json={"numbers": []})
        assert resp.status_code == 422
