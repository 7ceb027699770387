"""
Interfaces for the external media collaborators.

The pipeline only talks to these ABCs; concrete adapters are injected.
"""

from abc import ABC, abstractmethod
from typing import Optional

import httpx

from reelsmith.models import GeneratedImage, TranscriptionResult


class ImageBackend(ABC):
    """Turns a prompt into an image (hosted URL or inline bytes)."""

    name: str = "image"
    download_timeout: float = 60.0

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        style: Optional[str],
        image_size: str,
        model: str,
    ) -> GeneratedImage:
        """Generate one image.

        Backend failures are reported through ``GeneratedImage.success`` and
        ``error`` rather than raised.
        """
        pass

    async def download(self, url: str) -> bytes:
        """Fetch a hosted image produced by this backend."""
        async with httpx.AsyncClient(timeout=self.download_timeout, follow_redirects=True) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.content


class SpeechSynthesizer(ABC):

    @abstractmethod
    async def synthesize(self, text: str, voice: str) -> bytes:
        """Return MP3 bytes for ``text`` spoken by ``voice``.

        Raises:
            AudioGenerationError: if no audio could be produced
        """
        pass


class Transcriber(ABC):

    @abstractmethod
    async def transcribe(self, audio: bytes, mime_type: str = "audio/mpeg") -> TranscriptionResult:
        """Word-level timestamps for ``audio``.

        Raises:
            TranscriptionError: if the audio could not be transcribed
        """
        pass
