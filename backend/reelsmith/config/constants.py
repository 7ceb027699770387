"""
Constants configuration

Constants, API settings, pipeline limits and CORS configuration.
"""

import os
from typing import Optional


def env_int(name: str, default: Optional[int], minimum: int = 0) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return max(int(raw), minimum)
    except (TypeError, ValueError):
        return default


def env_float(name: str, default: float, minimum: float = 0.0) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return max(float(raw), minimum)
    except (TypeError, ValueError):
        return default


# API settings
API_TITLE = "Reelsmith API"
API_DESCRIPTION = "Turn a text script into a narrated, captioned short vertical video"
API_VERSION = "1.0.0"

# CORS origins
CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:3001",
    "http://localhost:5173",
]

# Planning limits
MAX_SEGMENTS = 10

# Captions
WORDS_PER_BATCH = env_int("WORDS_PER_BATCH", 3, minimum=1)

# Duration estimate used when transcription is unavailable (~150 words per minute)
SECONDS_PER_WORD = env_float("SECONDS_PER_WORD", 0.4, minimum=0.05)

# Rendering
VIDEO_FPS = 30
DEFAULT_IMAGE_SIZE = "portrait_16_9"

# Narration
DEFAULT_VOICE = os.getenv("DEFAULT_VOICE", "en-US-GuyNeural")

# None keeps the fan-out unbounded
MEDIA_MAX_CONCURRENCY = env_int("MEDIA_MAX_CONCURRENCY", None, minimum=1)

__all__ = [
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "CORS_ORIGINS",
    "MAX_SEGMENTS",
    "WORDS_PER_BATCH",
    "SECONDS_PER_WORD",
    "VIDEO_FPS",
    "DEFAULT_IMAGE_SIZE",
    "DEFAULT_VOICE",
    "MEDIA_MAX_CONCURRENCY",
    "env_int",
    "env_float",
]
