"""
Word-level transcription of narration audio with Gemini.
"""

from typing import Any, Dict, List, Optional

from google.genai import types

from reelsmith.config import TRANSCRIPTION_MODEL
from reelsmith.core import ProviderError, TranscriptionError, get_logger
from reelsmith.models import TranscribedWord, TranscriptionResult

from ..llm.base import LLMConfig, LLMProvider
from ..parsing import parse_json_response
from .base import Transcriber

logger = get_logger(__name__, component="transcription")

TRANSCRIPTION_INSTRUCTION = """Transcribe the attached narration audio.
Return word-level timestamps in seconds from the start of the audio as JSON:
{"text": "<full transcript>", "words": [{"word": "<word>", "start": <float>, "end": <float>}], "duration": <float>}
List every spoken word in order. Do not add commentary."""

TRANSCRIPTION_SCHEMA = {
    "type": "object",
    "properties": {
        "text": {"type": "string"},
        "words": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "word": {"type": "string"},
                    "start": {"type": "number"},
                    "end": {"type": "number"},
                },
                "required": ["word", "start", "end"],
            },
        },
        "duration": {"type": "number"},
    },
    "required": ["words"],
}


def validate_word(raw: Any) -> bool:
    """A usable word has a string ``word`` and numeric ``0 <= start <= end``."""
    if not isinstance(raw, dict) or not isinstance(raw.get("word"), str):
        return False
    start, end = raw.get("start"), raw.get("end")
    if isinstance(start, bool) or isinstance(end, bool):
        return False
    if not isinstance(start, (int, float)) or not isinstance(end, (int, float)):
        return False
    return 0 <= start <= end


def parse_transcription(payload: Dict[str, Any]) -> TranscriptionResult:
    """Build a TranscriptionResult from the model's JSON payload.

    Raises:
        TranscriptionError: if the payload has no valid word list
    """
    raw_words = payload.get("words") if isinstance(payload, dict) else None
    if not isinstance(raw_words, list) or not raw_words:
        raise TranscriptionError("Transcription response has no word list")

    invalid = [w for w in raw_words if not validate_word(w)]
    if invalid:
        raise TranscriptionError(f"Transcription response has {len(invalid)} malformed words")

    words = [
        TranscribedWord(word=w["word"], start=float(w["start"]), end=float(w["end"]))
        for w in raw_words
    ]
    duration = payload.get("duration")
    if not isinstance(duration, (int, float)) or isinstance(duration, bool) or duration <= 0:
        duration = words[-1].end

    text = payload.get("text")
    if not isinstance(text, str) or not text.strip():
        text = " ".join(w.word for w in words)

    return TranscriptionResult(text=text, words=words, duration=float(duration))


class GeminiTranscriber(Transcriber):
    """Sends the audio inline to a Gemini model and asks for timestamps as JSON."""

    def __init__(self, provider: LLMProvider, model: Optional[str] = None):
        self.provider = provider
        self.model = model or TRANSCRIPTION_MODEL

    async def transcribe(self, audio: bytes, mime_type: str = "audio/mpeg") -> TranscriptionResult:
        if not audio:
            raise TranscriptionError("No audio to transcribe")

        contents: List[Any] = [
            types.Part.from_bytes(data=audio, mime_type=mime_type),
            TRANSCRIPTION_INSTRUCTION,
        ]
        config = LLMConfig(
            model=self.model,
            temperature=0.0,
            response_schema=TRANSCRIPTION_SCHEMA,
        )

        try:
            response = await self.provider.generate(contents, config)
        except ProviderError as e:
            raise TranscriptionError(f"Transcription request failed: {e}") from e

        result = parse_transcription(parse_json_response(response.text))
        logger.debug(
            "Transcribed narration",
            extra={"word_count": len(result.words), "audio_duration": result.duration},
        )
        return result
