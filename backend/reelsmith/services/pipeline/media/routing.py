"""
Image model routing.

Pure functions: pick the model key for a segment and the backend that serves it.
"""

from typing import Optional

from reelsmith.config import DEFAULT_IMAGE_MODEL, GEMINI_IMAGE_MODELS, ImageStyle

FAL_BACKEND = "fal"
GEMINI_BACKEND = "gemini"

# Checked in order against the style's model path
_STYLE_MODEL_MARKERS = (
    ("schnell", "flux-schnell"),
    ("dev", "flux-dev"),
    ("pro", "flux-pro"),
    ("nano-banana", "nano-banana"),
)


def resolve_image_model(image_model: Optional[str], style: Optional[ImageStyle]) -> str:
    """An explicit model wins; otherwise derive the key from the style's model path."""
    if image_model:
        return image_model
    if style is None:
        return DEFAULT_IMAGE_MODEL
    for marker, model_key in _STYLE_MODEL_MARKERS:
        if marker in style.model:
            return model_key
    return DEFAULT_IMAGE_MODEL


def is_gemini_image_model(model: str) -> bool:
    return model in GEMINI_IMAGE_MODELS or model.startswith("imagen")


def select_backend(model: str) -> str:
    return GEMINI_BACKEND if is_gemini_image_model(model) else FAL_BACKEND


def enhance_prompt(prompt: str, style: Optional[ImageStyle]) -> str:
    """Prefix the style's base prompt."""
    if style is None:
        return prompt
    return f"{style.system_prompt}. {prompt}"
