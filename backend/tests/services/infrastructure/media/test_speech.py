"""
Tests for reelsmith.services.infrastructure.media.speech
"""

import pytest

from reelsmith.core import AudioGenerationError
from reelsmith.services.infrastructure.media import EdgeSpeechSynthesizer
from reelsmith.services.infrastructure.media import speech


def communicate_yielding(chunks, error=None):
    created = []

    class FakeCommunicate:
        def __init__(self, text, voice, rate=None, pitch=None):
            created.append({"text": text, "voice": voice, "rate": rate})

        async def stream(self):
            for chunk in chunks:
                yield chunk
            if error is not None:
                raise error

    return FakeCommunicate, created


class TestEdgeSpeechSynthesizer:

    @pytest.mark.asyncio
    async def test_collects_audio_chunks(self, monkeypatch):
        fake, created = communicate_yielding([
            {"type": "audio", "data": b"ab"},
            {"type": "WordBoundary", "offset": 0, "duration": 10, "text": "Hi"},
            {"type": "audio", "data": b"cd"},
        ])
        monkeypatch.setattr(speech.edge_tts, "Communicate", fake)

        audio = await EdgeSpeechSynthesizer().synthesize("Hi there", "en-US-GuyNeural")

        assert audio == b"abcd"
        assert created == [{"text": "Hi there", "voice": "en-US-GuyNeural", "rate": "+12%"}]

    @pytest.mark.asyncio
    async def test_no_audio_raises(self, monkeypatch):
        fake, _ = communicate_yielding([])
        monkeypatch.setattr(speech.edge_tts, "Communicate", fake)

        with pytest.raises(AudioGenerationError):
            await EdgeSpeechSynthesizer().synthesize("Hi", "en-US-GuyNeural")

    @pytest.mark.asyncio
    async def test_stream_error_raises_audio_error(self, monkeypatch):
        fake, _ = communicate_yielding([{"type": "audio", "data": b"ab"}], error=ConnectionError("reset"))
        monkeypatch.setattr(speech.edge_tts, "Communicate", fake)

        with pytest.raises(AudioGenerationError, match="reset"):
            await EdgeSpeechSynthesizer().synthesize("Hi", "en-US-GuyNeural")
