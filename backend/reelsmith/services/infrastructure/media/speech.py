"""
Narration synthesis with Microsoft Edge TTS.
"""

import edge_tts

from reelsmith.config import DEFAULT_VOICE
from reelsmith.core import AudioGenerationError, get_logger

from .base import SpeechSynthesizer

logger = get_logger(__name__, component="speech")


class EdgeSpeechSynthesizer(SpeechSynthesizer):

    def __init__(self, rate: str = "+12%", pitch: str = "+0Hz"):
        self.rate = rate
        self.pitch = pitch

    async def synthesize(self, text: str, voice: str) -> bytes:
        voice = voice or DEFAULT_VOICE
        communicate = edge_tts.Communicate(text, voice, rate=self.rate, pitch=self.pitch)

        audio = bytearray()
        try:
            async for chunk in communicate.stream():
                if chunk["type"] == "audio":
                    audio.extend(chunk["data"])
        except Exception as e:
            raise AudioGenerationError(f"Speech synthesis failed for voice {voice}: {e}") from e

        if not audio:
            raise AudioGenerationError(f"Speech synthesis returned no audio for voice {voice}")

        logger.debug("Synthesized narration", extra={"voice": voice, "bytes": len(audio)})
        return bytes(audio)
