"""
Media generation - concurrent image and narration generation per segment
"""

from .coordinator import MediaGenerationCoordinator
from .routing import (
    FAL_BACKEND,
    GEMINI_BACKEND,
    enhance_prompt,
    is_gemini_image_model,
    resolve_image_model,
    select_backend,
)

__all__ = [
    "MediaGenerationCoordinator",
    "FAL_BACKEND",
    "GEMINI_BACKEND",
    "enhance_prompt",
    "is_gemini_image_model",
    "resolve_image_model",
    "select_backend",
]
