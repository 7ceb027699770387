import json

import pytest
from fastapi.testclient import TestClient

from reelsmith.core import ProviderError
from reelsmith.dependencies import get_planner
from reelsmith.main import app
from reelsmith.services.pipeline.planning import SegmentPlanner


@pytest.fixture
def use_planner():
    def _use(llm):
        app.dependency_overrides[get_planner] = lambda: SegmentPlanner(llm)
        return TestClient(app)
    yield _use
    app.dependency_overrides.clear()


def test_break_script(use_planner, fake_llm):
    client = use_planner(fake_llm([json.dumps({"chunks": ["Hello world.", "This is a test."]})]))

    response = client.post("/api/break-script", json={"script": "Hello world. This is a test."})

    assert response.status_code == 200
    assert response.json() == {"chunks": ["Hello world.", "This is a test."]}


def test_break_script_blank(use_planner, fake_llm):
    client = use_planner(fake_llm())

    assert client.post("/api/break-script", json={"script": ""}).status_code == 400


def test_break_script_unusable_output(use_planner, fake_llm):
    client = use_planner(fake_llm(["I cannot help with that."]))

    assert client.post("/api/break-script", json={"script": "Hello."}).status_code == 502


def test_generate_image_prompts(use_planner, fake_llm):
    llm = fake_llm([json.dumps({"prompts": ["p3"]})])
    client = use_planner(llm)

    response = client.post(
        "/api/generate-image-prompts",
        json={"chunks": ["Third."], "style_id": "comic", "previous_prompts": ["p1", "p2"]},
    )

    assert response.status_code == 200
    assert response.json() == {"prompts": ["p3"]}
    assert '["p1", "p2"]' in llm.calls[0][0]


def test_generate_image_prompts_empty(use_planner, fake_llm):
    client = use_planner(fake_llm())

    assert client.post("/api/generate-image-prompts", json={"chunks": []}).status_code == 400


def test_generate_image_prompts_provider_down(use_planner, fake_llm):
    client = use_planner(fake_llm(error=ProviderError("quota exceeded")))

    response = client.post("/api/generate-image-prompts", json={"chunks": ["a"]})

    assert response.status_code == 502
    assert "quota exceeded" in response.json()["detail"]
