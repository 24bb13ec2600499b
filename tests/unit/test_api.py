"""Tests for the HTTP analysis endpoint and error mapping."""

from __future__ import annotations

from fastapi.testclient import TestClient

from supplement_guard.api.app import create_app
from supplement_guard.config import AppSettings
from tests.fakes.fake_generation import FakeGenerationClient, StatusError


def _client(settings: AppSettings, fake: FakeGenerationClient) -> TestClient:
    return TestClient(create_app(settings, client=fake))


class TestHealth:
    def test_health_and_ready(self, settings: AppSettings) -> None:
        with _client(settings, FakeGenerationClient()) as client:
            assert client.get("/health").json() == {"status": "ok"}
            resp = client.get("/ready")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ready", "model": "gemini/test-model"}

    def test_not_ready_without_credential(self, keyless_settings: AppSettings) -> None:
        with _client(keyless_settings, FakeGenerationClient()) as client:
            assert client.get("/health").status_code == 200
            resp = client.get("/ready")
        assert resp.status_code == 503
        assert resp.json() == {"status": "not_ready", "reason": "missing_credential"}


class TestAnalyzeEndpoint:
    def test_success(self, settings: AppSettings, sample_report: str) -> None:
        fake = FakeGenerationClient(text=sample_report)
        with _client(settings, fake) as client:
            resp = client.post("/api/analyze", json={"items": ["Aspirin", "Omega-3"]})

        assert resp.status_code == 200
        body = resp.json()
        assert body["verdict"] == "caution"
        assert body["blocks"][0] == {"kind": "heading", "level": 3, "text": "Summary"}
        assert "[Aspirin, Omega-3]" in fake.calls[0]["prompt"]

    def test_overrides_reach_client(self, settings: AppSettings) -> None:
        fake = FakeGenerationClient()
        with _client(settings, fake) as client:
            resp = client.post(
                "/api/analyze",
                json={"items": ["Aspirin"], "temperature": 0.1, "grounding_enabled": False, "model": "gemini/x"},
            )

        assert resp.status_code == 200
        config = fake.calls[0]["config"]
        assert config.temperature == 0.1
        assert config.grounding_enabled is False
        assert config.model_identifier == "gemini/x"

    def test_empty_items(self, settings: AppSettings) -> None:
        with _client(settings, FakeGenerationClient()) as client:
            resp = client.post("/api/analyze", json={"items": ["  "]})
        assert resp.status_code == 422
        assert resp.json()["type"] == "empty_input"

    def test_missing_credential(self, keyless_settings: AppSettings) -> None:
        fake = FakeGenerationClient()
        with _client(keyless_settings, fake) as client:
            resp = client.post("/api/analyze", json={"items": ["Aspirin"]})
        assert resp.status_code == 503
        assert resp.json()["type"] == "missing_credential"
        assert fake.calls == []

    def test_quota(self, settings: AppSettings) -> None:
        fake = FakeGenerationClient(error=StatusError("Too many requests", 429))
        with _client(settings, fake) as client:
            resp = client.post("/api/analyze", json={"items": ["Aspirin"]})
        assert resp.status_code == 429
        body = resp.json()
        assert body["type"] == "quota_exhausted"
        assert body["guidance"]

    def test_invalid_credential(self, settings: AppSettings) -> None:
        fake = FakeGenerationClient(error=StatusError("model not found", 404))
        with _client(settings, fake) as client:
            resp = client.post("/api/analyze", json={"items": ["Aspirin"]})
        assert resp.status_code == 502
        assert resp.json()["type"] == "invalid_credential"

    def test_empty_response(self, settings: AppSettings) -> None:
        with _client(settings, FakeGenerationClient(text="")) as client:
            resp = client.post("/api/analyze", json={"items": ["Aspirin"]})
        assert resp.status_code == 502
        assert resp.json()["type"] == "empty_response"

    def test_transient_passes_message(self, settings: AppSettings) -> None:
        fake = FakeGenerationClient(error=RuntimeError("upstream hiccup"))
        with _client(settings, fake) as client:
            resp = client.post("/api/analyze", json={"items": ["Aspirin"]})
        assert resp.status_code == 502
        assert resp.json() == {
            "error": "upstream hiccup",
            "type": "transient_service_error",
            "guidance": "The analysis service had a temporary problem. Please try again.",
        }

    def test_invalid_temperature_rejected_by_validation(self, settings: AppSettings) -> None:
        with _client(settings, FakeGenerationClient()) as client:
            resp = client.post("/api/analyze", json={"items": ["Aspirin"], "temperature": 3})
        assert resp.status_code == 422
