"""
Media collaborators: image generation, speech synthesis and transcription.
"""

from .base import ImageBackend, SpeechSynthesizer, Transcriber
from .fal_backend import FalImageBackend
from .gemini_image_backend import GeminiImageBackend
from .speech import EdgeSpeechSynthesizer
from .transcription import GeminiTranscriber, parse_transcription, validate_word

__all__ = [
    "ImageBackend",
    "SpeechSynthesizer",
    "Transcriber",
    "FalImageBackend",
    "GeminiImageBackend",
    "EdgeSpeechSynthesizer",
    "GeminiTranscriber",
    "parse_transcription",
    "validate_word",
]
