"""
Tests for reelsmith.services.infrastructure.media.transcription
"""

import json

import pytest
from google.genai import types

from reelsmith.core import ProviderError, TranscriptionError
from reelsmith.services.infrastructure.media import GeminiTranscriber, parse_transcription, validate_word


PAYLOAD = {
    "text": "Hello world.",
    "words": [
        {"word": "Hello", "start": 0.0, "end": 0.42},
        {"word": "world.", "start": 0.5, "end": 0.98},
    ],
    "duration": 1.1,
}


class TestValidateWord:

    @pytest.mark.parametrize("raw", [
        {"word": "ok", "start": 0, "end": 0},
        {"word": "ok", "start": 0.1, "end": 2},
    ])
    def test_valid(self, raw):
        assert validate_word(raw)

    @pytest.mark.parametrize("raw", [
        {"word": 3, "start": 0, "end": 1},
        {"word": "x", "start": -0.1, "end": 1},
        {"word": "x", "start": 2, "end": 1},
        {"word": "x", "start": "0", "end": 1},
        {"word": "x", "start": True, "end": 1},
        "x",
    ])
    def test_invalid(self, raw):
        assert not validate_word(raw)


class TestParseTranscription:

    def test_valid_payload(self):
        result = parse_transcription(PAYLOAD)
        assert [w.word for w in result.words] == ["Hello", "world."]
        assert result.duration == 1.1

    def test_duration_falls_back_to_last_word(self):
        result = parse_transcription({"words": PAYLOAD["words"]})
        assert result.duration == 0.98
        assert result.text == "Hello world."

    def test_missing_words(self):
        with pytest.raises(TranscriptionError):
            parse_transcription({"duration": 2.0})

    def test_malformed_word(self):
        with pytest.raises(TranscriptionError):
            parse_transcription({"words": [{"word": "x", "start": 1, "end": 0}]})


class TestGeminiTranscriber:

    @pytest.mark.asyncio
    async def test_sends_audio_inline(self, fake_llm):
        llm = fake_llm([json.dumps(PAYLOAD)])

        result = await GeminiTranscriber(llm, model="gemini-2.5-flash").transcribe(b"mp3-bytes")

        contents, config = llm.calls[0]
        assert isinstance(contents[0], types.Part)
        assert config.model == "gemini-2.5-flash"
        assert config.response_schema is not None
        assert len(result.words) == 2

    @pytest.mark.asyncio
    async def test_unparseable_response(self, fake_llm):
        with pytest.raises(TranscriptionError):
            await GeminiTranscriber(fake_llm(["I could not hear anything"])).transcribe(b"mp3")

    @pytest.mark.asyncio
    async def test_provider_failure(self, fake_llm):
        with pytest.raises(TranscriptionError):
            await GeminiTranscriber(fake_llm(error=ProviderError("down"))).transcribe(b"mp3")

    @pytest.mark.asyncio
    async def test_empty_audio(self, fake_llm):
        with pytest.raises(TranscriptionError):
            await GeminiTranscriber(fake_llm()).transcribe(b"")
