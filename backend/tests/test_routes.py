from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from gtm_studio.api import routes
from gtm_studio.core.settings import settings
from gtm_studio.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/").json() == {"ok": True, "service": settings.app_name}


def test_plan_with_empty_body_object(client):
    response = client.post("/api/plan", json={})
    assert response.status_code == 200
    plan = response.json()["plan"]
    assert plan["executiveSummary"][0].startswith("Your Product")
    assert plan["channelPlan"] and plan["followUps"]


def test_plan_rejects_array_body(client):
    response = client.post("/api/plan", json=["stage"])
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid payload"}


def test_plan_rejects_malformed_json(client):
    response = client.post("/api/plan", content=b"{oops", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_plan_strict_enums_setting(client, monkeypatch):
    monkeypatch.setattr(settings, "strict_enums", True)
    response = client.post("/api/plan", json={"stage": "seed"})
    assert response.status_code == 400
    assert "stage" in response.json()["error"]


def test_options_include_sample_brief(client):
    data = client.get("/api/options").json()
    assert [o["value"] for o in data["budgetLevels"]] == ["lean", "balanced", "aggressive"]
    assert data["sampleBrief"]["productName"] == "Atlas IQ Copilot"


def test_render_writes_images(client, monkeypatch, tmp_path: Path):
    monkeypatch.setattr(settings, "outputs_dir", str(tmp_path))
    response = client.post("/api/plan/render", json={"productName": "Atlas"})
    assert response.status_code == 200
    data = response.json()
    assert data["renderKey"].startswith("atlas_")
    assert data["plan"]["channelPlan"]
    assert all(Path(f).exists() for f in data["files"])


def test_plan_rejects_deeply_nested_body(client):
    response = client.post("/api/plan", content=b"[" * 100000 + b"]" * 100000)
    assert response.status_code == 400
    assert response.json() == {"error": "Malformed JSON body"}


def test_render_runs_in_threadpool(client, monkeypatch, tmp_path: Path):
    calls = []

    async def fake_threadpool(func, *args, **kwargs):
        calls.append(func.__name__)
        return func(*args, **kwargs)

    monkeypatch.setattr(settings, "outputs_dir", str(tmp_path))
    monkeypatch.setattr(routes, "run_in_threadpool", fake_threadpool)
    response = client.post("/api/plan/render", json={})
    assert response.status_code == 200
    assert calls == ["render"]
