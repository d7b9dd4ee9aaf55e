import base64

import pytest
from fastapi.testclient import TestClient

from backend import main
from backend.prompts import ANALYSIS_PROMPT, TARGET_LANGUAGE


class FakeModel:
    def __init__(self, text="The plant looks healthy.", error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def generate_text(self, prompt, image=None, mime_type=None):
        self.calls.append({"prompt": prompt, "image": image, "mime_type": mime_type})
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def client():
    return TestClient(main.app)


@pytest.fixture
def fake_model(monkeypatch):
    model = FakeModel()
    monkeypatch.setattr(main, "model", model)
    return model


def image_payload(data, mime_type="image/png"):
    return {"mime_type": mime_type, "data": base64.b64encode(data).decode("ascii")}


def test_root_lists_endpoints(client):
    body = client.get("/").json()

    assert body["status"] == "online"
    assert set(body["endpoints"]) == {"health", "analyze", "translate"}


def test_health_reports_model_state(client, fake_model):
    body = client.get("/health").json()

    assert body["status"] == "healthy"
    assert body["model_ready"] is True


def test_analyze_sends_prompt_and_image(client, fake_model, png_bytes):
    response = client.post("/analyze", json=image_payload(png_bytes))

    assert response.status_code == 200
    assert response.json()["text"] == "The plant looks healthy."
    assert len(fake_model.calls) == 1
    call = fake_model.calls[0]
    assert call["prompt"] == ANALYSIS_PROMPT
    assert call["image"] == png_bytes
    assert call["mime_type"] == "image/png"


def test_analyze_accepts_data_url(client, fake_model, png_bytes):
    payload = image_payload(png_bytes)
    payload["data"] = f"data:image/png;base64,{payload['data']}"

    response = client.post("/analyze", json=payload)

    assert response.status_code == 200
    assert fake_model.calls[0]["image"] == png_bytes


def test_analyze_rejects_invalid_base64(client, fake_model):
    response = client.post("/analyze", json={"mime_type": "image/png", "data": "not base64!!"})

    assert response.status_code == 400
    assert fake_model.calls == []


def test_analyze_rejects_empty_image(client, fake_model):
    response = client.post("/analyze", json={"mime_type": "image/png", "data": ""})

    assert response.status_code == 400
    assert fake_model.calls == []


def test_analyze_rejects_non_image(client, fake_model):
    response = client.post("/analyze", json=image_payload(b"%PDF-1.4", mime_type="application/pdf"))

    assert response.status_code == 400
    assert fake_model.calls == []


def test_analyze_without_model_is_unavailable(client, monkeypatch, png_bytes):
    monkeypatch.setattr(main, "model", None)

    response = client.post("/analyze", json=image_payload(png_bytes))

    assert response.status_code == 503


def test_provider_failure_is_bad_gateway(client, fake_model, png_bytes):
    fake_model.error = RuntimeError("API key not valid")

    response = client.post("/analyze", json=image_payload(png_bytes))

    assert response.status_code == 502
    assert "API key not valid" in response.json()["detail"]


def test_translate_wraps_text_in_prompt(client, fake_model):
    fake_model.text = "છોડ સ્વસ્થ લાગે છે."

    response = client.post("/translate", json={"text": "The plant looks healthy."})

    assert response.status_code == 200
    body = response.json()
    assert body["text"] == "છોડ સ્વસ્થ લાગે છે."
    assert body["language"] == TARGET_LANGUAGE
    prompt = fake_model.calls[0]["prompt"]
    assert prompt.startswith(f"Translate the following plant analysis to {TARGET_LANGUAGE}:")
    assert prompt.endswith("The plant looks healthy.")
    assert fake_model.calls[0]["image"] is None


def test_translate_rejects_blank_text(client, fake_model):
    response = client.post("/translate", json={"text": "   "})

    assert response.status_code == 400
    assert fake_model.calls == []


def test_translate_provider_failure(client, fake_model):
    fake_model.error = TimeoutError("deadline exceeded")

    response = client.post("/translate", json={"text": "Leaf spot detected."})

    assert response.status_code == 502


def test_load_model_requires_api_key(monkeypatch):
    monkeypatch.setattr(main, "model", None)
    monkeypatch.setattr(main.settings, "GEMINI_API_KEY", "")

    assert main.load_model() is False
    assert main.model is None
