"""
Application configuration and settings
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from .paths import APP_DIR, BACKEND_DIR, OUTPUT_DIR, PROJECT_DATA_DIR, PUBLIC_OUTPUT_URL
from .constants import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    MAX_SEGMENTS,
    WORDS_PER_BATCH,
    SECONDS_PER_WORD,
    VIDEO_FPS,
    DEFAULT_IMAGE_SIZE,
    DEFAULT_VOICE,
    MEDIA_MAX_CONCURRENCY,
    env_int,
    env_float,
)
from .models import (
    SEGMENTER_MODEL,
    PROMPT_MODEL,
    TRANSCRIPTION_MODEL,
    DEFAULT_IMAGE_MODEL,
    FAL_IMAGE_MODELS,
    GEMINI_IMAGE_MODELS,
)
from .styles import ImageStyle, IMAGE_STYLES, get_image_style, get_default_image_style
from .voices import VOICES_BY_LANGUAGE, is_known_voice

__all__ = [
    "APP_DIR",
    "BACKEND_DIR",
    "OUTPUT_DIR",
    "PROJECT_DATA_DIR",
    "PUBLIC_OUTPUT_URL",
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
    "SEGMENTER_MODEL",
    "PROMPT_MODEL",
    "TRANSCRIPTION_MODEL",
    "DEFAULT_IMAGE_MODEL",
    "FAL_IMAGE_MODELS",
    "GEMINI_IMAGE_MODELS",
    "ImageStyle",
    "IMAGE_STYLES",
    "get_image_style",
    "get_default_image_style",
    "VOICES_BY_LANGUAGE",
    "is_known_voice",
]
