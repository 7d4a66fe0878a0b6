"""
HTTP API tests with the classifier and store swapped for in-process fakes.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from haircare.application.exceptions import ClassifierContractError
from haircare.application.ports.hair_classifier import HairClassifierPort
from haircare.application.use_cases.analyze_hair import AnalyzeHairUseCase
from haircare.application.use_cases.recommend_care import RecommendCareUseCase
from haircare.application.use_cases.scan_history import ScanHistoryUseCase
from haircare.infrastructure.classifier.mock_classifier import MockHairClassifier
from haircare.infrastructure.store.memory_store import MemoryScanHistoryStore
from haircare.main import app
from haircare.wiring.dependencies import get_analyze_hair_use_case, get_scan_history_use_case


class BrokenClassifier(HairClassifierPort):
    def classify(self, image):
        raise ClassifierContractError("success=false")


@pytest.fixture
def store():
    return MemoryScanHistoryStore()


@pytest.fixture
def state():
    return {"classifier": MockHairClassifier(hair_type="straight", confidence=0.75)}


@pytest.fixture
def client(store, state):
    history = ScanHistoryUseCase(store=store)

    app.dependency_overrides[get_scan_history_use_case] = lambda: history
    app.dependency_overrides[get_analyze_hair_use_case] = lambda: AnalyzeHairUseCase(
        classifier=state["classifier"],
        recommend_care=RecommendCareUseCase(),
        history=history,
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def _upload(client: TestClient, user_id: str | None = None, content: bytes = b"jpeg-bytes", **form):
    headers = {"X-User-Id": user_id} if user_id else {}
    return client.post(
        "/api/v1/scans",
        files={"image": ("hair.jpg", content, "image/jpeg")},
        data=form,
        headers=headers,
    )


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_recommendations_endpoint(client):
    resp = client.post(
        "/api/v1/recommendations",
        json={"hair_type": "curly", "dandruff_level": "High", "hair_loss_stage": "Stage 3"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["oils"]) == 3
    assert {o["key"] for o in data["oils"]} <= {"thrive", "jojoba", "rosemary", "indulekha"}
    assert [t["title"] for t in data["tips"]] == [
        "Gentle Cleansing",
        "Moisture Lock",
        "Anti-Dandruff Care",
        "Professional Care",
    ]


def test_recommendations_defaults_and_validation(client):
    resp = client.post("/api/v1/recommendations", json={"hair_type": "straight"})
    assert resp.status_code == 200
    assert [t["title"] for t in resp.json()["tips"]] == ["Volume Boost", "Heat Protection"]

    resp = client.post("/api/v1/recommendations", json={"hair_type": "dry", "dandruff_level": "Severe"})
    assert resp.status_code == 422


def test_oil_catalog_endpoint(client):
    keys = [o["key"] for o in client.get("/api/v1/oils").json()]
    assert keys == ["moroccanoil", "indulekha", "rosemary", "jojoba", "thrive"]


def test_scan_flow_with_history(client, store):
    resp = _upload(client, user_id="user-1", dandruff_level="Mid", hair_loss_stage="Stage 2")
    assert resp.status_code == 200
    data = resp.json()
    assert data["hair_type"] == "straight"
    assert data["confidence_percentage"] == "75.00%"
    assert data["dandruff_level"] == "Mid"
    assert data["hair_loss_stage"] == "Stage 2"
    assert [t["title"] for t in data["tips"]] == ["Volume Boost", "Heat Protection", "Scalp Health", "Early Intervention"]
    assert data["scan_id"]

    history = client.get("/api/v1/scans", headers={"X-User-Id": "user-1"}).json()
    assert [s["scan_id"] for s in history] == [data["scan_id"]]
    assert history[0]["recommended_oils"] == [o["name"] for o in data["oils"]]
    assert history[0]["formatted_date"]

    latest = client.get("/api/v1/scans/latest", headers={"X-User-Id": "user-1"})
    assert latest.json()["scan_id"] == data["scan_id"]
    assert client.get("/api/v1/scans/count", headers={"X-User-Id": "user-1"}).json() == {"count": 1}

    assert client.delete(f"/api/v1/scans/{data['scan_id']}", headers={"X-User-Id": "other"}).json() == {"deleted": False}
    assert client.delete(f"/api/v1/scans/{data['scan_id']}", headers={"X-User-Id": "user-1"}).json() == {"deleted": True}
    assert client.get("/api/v1/scans/count", headers={"X-User-Id": "user-1"}).json() == {"count": 0}


def test_scan_without_user_is_not_persisted(client, store):
    resp = _upload(client)
    assert resp.status_code == 200
    assert resp.json()["scan_id"] is None
    assert resp.json()["dandruff_level"] == "Low"
    assert client.get("/api/v1/scans").json() == []
    assert client.get("/api/v1/scans/latest").status_code == 404
    assert client.get("/api/v1/scans/count").json() == {"count": 0}


def test_scan_rejects_empty_image(client):
    assert _upload(client, user_id="user-1", content=b"").status_code == 400


def test_scan_rejects_unknown_stage(client):
    assert _upload(client, hair_loss_stage="Stage 9").status_code == 422


def test_scan_classifier_failure_is_bad_gateway(client, store, state):
    state["classifier"] = BrokenClassifier()
    resp = _upload(client, user_id="user-1")
    assert resp.status_code == 502
    assert "try again" in resp.json()["detail"]
    assert store.count_for_user("user-1") == 0
