import pytest
from fastapi.testclient import TestClient

from villa_import.main import app
from villa_import.settings import settings


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_parse_endpoint(client, sample_post):
    r = client.post("/smart-import/parse", json={"text": sample_post}, headers={"x-request-id": "abc"})
    assert r.status_code == 200
    assert r.headers["X-Request-ID"] == "abc"
    body = r.json()
    assert body["missing_fields"] == []
    assert body["data"]["code"] == "MS208"
    assert body["data"]["price_weekend"] == 7_000_000
    assert body["data"]["amenity_ids"] == [1, 2, 3, 4, 5, 6, 9, 16, 14]


def test_parse_endpoint_reports_missing(client):
    r = client.post("/smart-import/parse", json={"text": "Villa đẹp cách biển 800m"})
    assert r.status_code == 200
    assert "Mã property (MS:XXX)" in r.json()["missing_fields"]


def test_parse_rejects_blank_text(client):
    r = client.post("/smart-import/parse", json={"text": "   \n"})
    assert r.status_code == 400
    assert r.json()["error"] == "INPUT_ERROR"


def test_parse_rejects_long_text(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_TEXT_LENGTH", 10)
    r = client.post("/smart-import/parse", json={"text": "Giá: 3.000.000/15 khách"})
    assert r.status_code == 400
    assert r.json()["error"] == "INPUT_ERROR"
    assert r.json()["details"] == {"max_length": 10, "length": 23}


def test_parse_requires_text_field(client):
    r = client.post("/smart-import/parse", json={})
    assert r.status_code == 422
    assert r.json()["error"] == "VALIDATION_ERROR"


def test_validate_endpoint(client):
    r = client.post("/smart-import/validate", json={"code": "MS1", "name": "Villa A", "bedroom_count": 3})
    assert r.status_code == 200
    assert r.json()["missing_fields"] == ["Giá ngày thường", "Số WC", "Số khách"]


def test_catalog(client):
    body = client.get("/smart-import/catalog").json()
    assert body["locations"]["5"] == "Trung Tâm"
    assert body["property_types"]["1"] == "Villa"
    assert body["amenities"]["14"] == "Gần biển"
    assert body["default_location_id"] == 5


def test_generates_request_id_and_timing_headers(client):
    r = client.post("/smart-import/parse", json={"text": "MS208 Giá: 3.000.000"})
    assert r.status_code == 200
    rid = r.headers["X-Request-ID"]
    assert len(rid) == 32 and all(c in "0123456789abcdef" for c in rid)
    assert int(r.headers["X-Process-Time-Ms"]) >= 0
