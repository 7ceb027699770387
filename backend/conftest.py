import os
import tempfile

import pytest

# Keep generated files out of the source tree; must run before reelsmith.config is imported
_TEST_ROOT = tempfile.mkdtemp(prefix="reelsmith-tests-")
os.environ.setdefault("OUTPUT_DIR", os.path.join(_TEST_ROOT, "outputs"))
os.environ.setdefault("PROJECT_DATA_DIR", os.path.join(_TEST_ROOT, "project_data"))

from reelsmith.core import AudioGenerationError, StorageError, TranscriptionError  # noqa: E402
from reelsmith.models import GeneratedImage, StoredArtifact, TranscribedWord, TranscriptionResult  # noqa: E402
from reelsmith.services.infrastructure.llm import LLMProvider, LLMResponse, ProviderType  # noqa: E402
from reelsmith.services.infrastructure.media import ImageBackend, SpeechSynthesizer, Transcriber  # noqa: E402
from reelsmith.services.infrastructure.storage import ArtifactStore, FileBasedProjectRepository  # noqa: E402


@pytest.fixture(autouse=True)
def mock_cloud_env(monkeypatch):
    """Tests never reach real providers"""
    monkeypatch.setenv("GEMINI_API_KEY", "mock-key")
    monkeypatch.setenv("FAL_KEY", "mock-fal-key")


class FakeLLM(LLMProvider):
    """Returns queued responses in order and records every call."""

    provider_type = ProviderType.GEMINI

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def is_available(self) -> bool:
        return True

    async def generate(self, prompt, config=None, **kwargs):
        self.calls.append((prompt, config))
        if self.error is not None:
            raise self.error
        text = self.responses.pop(0) if self.responses else "{}"
        return LLMResponse(text=text, model=config.model if config else "fake", provider=self.provider_type)


class FakeImageBackend(ImageBackend):
    """Hosted-URL backend; prompts containing a ``fail_marker`` fail."""

    name = "fake"

    def __init__(self, fail_markers=(), raise_markers=(), download_error=None):
        self.fail_markers = tuple(fail_markers)
        self.raise_markers = tuple(raise_markers)
        self.download_error = download_error
        self.calls = []

    async def generate(self, prompt, style, image_size, model):
        self.calls.append({"prompt": prompt, "style": style, "image_size": image_size, "model": model})
        if any(marker in prompt for marker in self.raise_markers):
            raise RuntimeError("backend exploded")
        if any(marker in prompt for marker in self.fail_markers):
            return GeneratedImage(success=False, error="API request failed: 500")
        return GeneratedImage(success=True, image_url=f"https://images.example/{len(self.calls)}.jpg")

    async def download(self, url):
        if self.download_error is not None:
            raise self.download_error
        return b"jpeg-bytes"


class FakeSpeech(SpeechSynthesizer):
    def __init__(self, fail_texts=()):
        self.fail_texts = tuple(fail_texts)
        self.calls = []

    async def synthesize(self, text, voice):
        self.calls.append((text, voice))
        if text in self.fail_texts:
            raise AudioGenerationError(f"no audio for {text!r}")
        return f"mp3:{text}".encode()


class FakeTranscriber(Transcriber):
    """Each word takes 0.5s: spoken for 0.4s followed by a 0.1s pause."""

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = 0

    async def transcribe(self, audio, mime_type="audio/mpeg"):
        self.calls += 1
        if self.fail:
            raise TranscriptionError("transcription unavailable")
        text = audio.decode().split(":", 1)[1]
        words = [
            TranscribedWord(word=w, start=i * 0.5, end=i * 0.5 + 0.4)
            for i, w in enumerate(text.split())
        ]
        return TranscriptionResult(text=text, words=words, duration=len(words) * 0.5)


class MemoryArtifactStore(ArtifactStore):
    def __init__(self, fail_kinds=()):
        self.fail_kinds = set(fail_kinds)
        self.objects = {}

    async def upload(self, data, owner_id, project_id, index, segment_id, kind, extension):
        if kind in self.fail_kinds:
            raise StorageError(f"{kind} bucket unavailable")
        key = f"{owner_id}/{project_id}/{segment_id}/{kind}/{kind}_{index}.{extension}"
        self.objects[key] = data
        return StoredArtifact(key=key, url=f"https://cdn.example/{key}")


@pytest.fixture
def fake_llm():
    return FakeLLM


@pytest.fixture
def fake_image_backend():
    return FakeImageBackend


@pytest.fixture
def fake_speech():
    return FakeSpeech


@pytest.fixture
def fake_transcriber():
    return FakeTranscriber


@pytest.fixture
def memory_store():
    return MemoryArtifactStore


@pytest.fixture
def repository(tmp_path):
    return FileBasedProjectRepository(storage_dir=tmp_path / "projects")
