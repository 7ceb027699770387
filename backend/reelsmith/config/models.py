"""
Model Configuration for Pipeline Steps

Each external generation step reads its model name from the environment so
models can be swapped without code changes.

=== TEXT / AUDIO (Gemini) ===

    SEGMENTER_MODEL      : splits the script into narration chunks
    PROMPT_MODEL         : writes one visual prompt per chunk
    TRANSCRIPTION_MODEL  : word-level timestamps for narration audio

=== IMAGES ===

Image models are routed to one of two backends by name:
    - fal.ai Flux family ("flux-schnell", "flux-dev", "flux-pro", "nano-banana")
    - Google Imagen through the Gemini API ("imagen-*")
"""

import os

SEGMENTER_MODEL = os.getenv("SEGMENTER_MODEL", "gemini-2.5-flash")
PROMPT_MODEL = os.getenv("PROMPT_MODEL", "gemini-2.5-flash")
TRANSCRIPTION_MODEL = os.getenv("TRANSCRIPTION_MODEL", "gemini-2.5-flash")

DEFAULT_IMAGE_MODEL = "flux-schnell"

# Model key -> fal.ai endpoint path
FAL_IMAGE_MODELS = {
    "flux-schnell": "fal-ai/flux/schnell",
    "flux-dev": "fal-ai/flux/dev",
    "flux-pro": "fal-ai/flux-pro",
    "nano-banana": "fal-ai/nano-banana",
}

GEMINI_IMAGE_MODELS = [
    "imagen-4.0-generate-001",
    "imagen-4.0-fast-generate-001",
    "imagen-3.0-generate-002",
]

__all__ = [
    "SEGMENTER_MODEL",
    "PROMPT_MODEL",
    "TRANSCRIPTION_MODEL",
    "DEFAULT_IMAGE_MODEL",
    "FAL_IMAGE_MODELS",
    "GEMINI_IMAGE_MODELS",
]
