"""
HTTP tests for the project routes. Generation runs for real against faked
providers; TestClient executes background tasks before returning.
"""

import json

import pytest
from fastapi.testclient import TestClient

from reelsmith.dependencies import (
    get_caption_use_case,
    get_frame_caption_use_case,
    get_project_use_case,
    get_segment_regeneration_use_case,
    get_subtitles_use_case,
    get_video_creation_use_case,
)
from reelsmith.main import app
from reelsmith.services.pipeline import PipelineOrchestrator
from reelsmith.services.pipeline.media import MediaGenerationCoordinator
from reelsmith.services.pipeline.planning import SegmentPlanner
from reelsmith.services.use_cases import (
    FrameCaptionUseCase,
    GetProjectUseCase,
    RegenerateSegmentMediaUseCase,
    ResolveCaptionUseCase,
    SubtitlesUseCase,
    VideoCreationUseCase,
)

SCRIPT = "Hello world. This is a test."


@pytest.fixture
def client(repository, fake_llm, fake_image_backend, fake_speech, fake_transcriber, memory_store):
    speech = fake_speech(fail_texts=("unspeakable",))
    llm = fake_llm([
        json.dumps({"chunks": ["Hello world.", "This is a test."]}),
        json.dumps({"prompts": ["p1", "p2"]}),
    ])
    coordinator = MediaGenerationCoordinator(
        image_backends={"fal": fake_image_backend(fail_markers=("forbidden",))},
        speech=speech,
        transcriber=fake_transcriber(),
        artifacts=memory_store(),
        repository=repository,
    )
    orchestrator = PipelineOrchestrator(repository, SegmentPlanner(llm), coordinator)

    app.dependency_overrides[get_video_creation_use_case] = lambda: VideoCreationUseCase(repository, orchestrator)
    app.dependency_overrides[get_project_use_case] = lambda: GetProjectUseCase(repository)
    app.dependency_overrides[get_caption_use_case] = lambda: ResolveCaptionUseCase(repository)
    app.dependency_overrides[get_frame_caption_use_case] = lambda: FrameCaptionUseCase(repository)
    app.dependency_overrides[get_subtitles_use_case] = lambda: SubtitlesUseCase(repository)
    app.dependency_overrides[get_segment_regeneration_use_case] = (
        lambda: RegenerateSegmentMediaUseCase(repository, coordinator)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def _create(client, owner="user-1", **body):
    return client.post(
        "/api/create-video",
        json={"script": SCRIPT, **body},
        headers={"X-User-Id": owner},
    )


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_video_runs_pipeline(client):
    response = _create(client, style_id="anime")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["status"] == "generating"
    assert "X-Request-ID" in response.headers

    project = client.get(f"/api/projects/{body['project_id']}", headers={"X-User-Id": "user-1"}).json()
    assert project["status"] == "completed"
    assert [s["text"] for s in project["segments"]] == ["Hello world.", "This is a test."]
    assert project["duration"] == 3.0
    assert project["total_frames"] == 90


def test_create_video_rejects_blank_script(client):
    response = client.post("/api/create-video", json={"script": "   "})

    assert response.status_code == 400


def test_create_video_requires_script(client):
    response = client.post("/api/create-video", json={})

    assert response.status_code == 422


def test_project_not_visible_to_other_owner(client):
    project_id = _create(client).json()["project_id"]

    response = client.get(f"/api/projects/{project_id}", headers={"X-User-Id": "someone-else"})

    assert response.status_code == 404


def test_unknown_project(client):
    assert client.get("/api/projects/missing").status_code == 404


def test_caption_for_segment(client):
    project_id = _create(client).json()["project_id"]

    response = client.get(
        f"/api/projects/{project_id}/segments/1/caption",
        params={"t": 0.2},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 200
    frame = response.json()
    assert frame["segment_order"] == 1
    assert frame["display_text"] == "This is a"
    assert frame["words"][0] == {"text": "This", "is_active": True, "is_completed": False}


def test_caption_rejects_negative_time(client):
    project_id = _create(client).json()["project_id"]

    response = client.get(
        f"/api/projects/{project_id}/segments/0/caption",
        params={"t": -1},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 422


def test_project_timeline(client):
    project_id = _create(client).json()["project_id"]

    project = client.get(f"/api/projects/{project_id}", headers={"X-User-Id": "user-1"}).json()

    assert [(e["from_frame"], e["duration_in_frames"]) for e in project["timeline"]] == [(0, 30), (30, 60)]
    assert project["timeline"][1]["segment_id"] == project["segments"][1]["id"]


def test_caption_for_frame(client):
    project_id = _create(client).json()["project_id"]

    response = client.get(
        f"/api/projects/{project_id}/caption",
        params={"frame": 45},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 200
    frame = response.json()
    assert frame["segment_order"] == 1
    assert frame["frame"] == 45
    assert frame["time"] == 0.5
    assert frame["words"][1] == {"text": "is", "is_active": True, "is_completed": False}


def test_caption_for_frame_past_the_end(client):
    project_id = _create(client).json()["project_id"]

    response = client.get(
        f"/api/projects/{project_id}/caption",
        params={"frame": 90},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 404


def test_subtitles(client):
    project_id = _create(client).json()["project_id"]

    response = client.get(
        f"/api/projects/{project_id}/subtitles",
        params={"words_per_line": 4},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 200
    lines = response.json()["lines"]
    assert [l["text"] for l in lines] == ["Hello world. This is", "a test."]
    assert lines[1]["start"] == pytest.approx(2.0)


def test_subtitles_reject_empty_lines(client):
    project_id = _create(client).json()["project_id"]

    response = client.get(
        f"/api/projects/{project_id}/subtitles",
        params={"words_per_line": 0},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 422


def _segments(client, project_id):
    return client.get(f"/api/projects/{project_id}", headers={"X-User-Id": "user-1"}).json()["segments"]


def test_regenerate_image(client):
    project_id = _create(client).json()["project_id"]
    segment = _segments(client, project_id)[1]

    response = client.post(
        f"/api/projects/{project_id}/segments/{segment['id']}/regenerate-image",
        json={"image_prompt": "a quiet harbor"},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 200
    assert response.json()["image_prompt"] == "a quiet harbor"
    assert _segments(client, project_id)[1]["image_prompt"] == "a quiet harbor"


def test_regenerate_image_failure(client):
    project_id = _create(client).json()["project_id"]
    segment = _segments(client, project_id)[0]

    response = client.post(
        f"/api/projects/{project_id}/segments/{segment['id']}/regenerate-image",
        json={"image_prompt": "forbidden subject"},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 502
    assert _segments(client, project_id)[0]["image_prompt"] == segment["image_prompt"]


def test_regenerate_audio(client):
    project_id = _create(client).json()["project_id"]
    segment = _segments(client, project_id)[0]

    response = client.post(
        f"/api/projects/{project_id}/segments/{segment['id']}/regenerate-audio",
        json={"text": "Hello there brave new world."},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["text"] == "Hello there brave new world."
    assert body["duration"] == 2.5
    project = client.get(f"/api/projects/{project_id}", headers={"X-User-Id": "user-1"}).json()
    assert project["duration"] == 4.5


def test_regenerate_audio_failure(client):
    project_id = _create(client).json()["project_id"]
    segment = _segments(client, project_id)[0]

    response = client.post(
        f"/api/projects/{project_id}/segments/{segment['id']}/regenerate-audio",
        json={"text": "unspeakable"},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 502


def test_regenerate_unknown_segment(client):
    project_id = _create(client).json()["project_id"]

    response = client.post(
        f"/api/projects/{project_id}/segments/missing/regenerate-audio",
        json={},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 404
