"""
Image style catalog.

A style contributes a base system prompt that is prefixed to every segment's
visual prompt, a human-readable name passed to the image backend, and the
image model it was tuned for.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ImageStyle:
    id: str
    name: str
    system_prompt: str
    model: str


IMAGE_STYLES: Dict[str, ImageStyle] = {
    "dark-eerie": ImageStyle(
        id="dark-eerie",
        name="dark and eerie",
        system_prompt=(
            "Dark, moody cinematic still, dramatic low-key lighting, high contrast, "
            "rich shadows, volumetric fog, desaturated palette"
        ),
        model="fal-ai/flux/schnell",
    ),
    "anime": ImageStyle(
        id="anime",
        name="anime",
        system_prompt=(
            "Detailed anime illustration, clean line art, vibrant cel shading, "
            "expressive characters, studio background painting"
        ),
        model="fal-ai/flux/dev",
    ),
    "photoreal": ImageStyle(
        id="photoreal",
        name="photorealistic",
        system_prompt=(
            "Photorealistic vertical photograph, 35mm lens, natural light, shallow depth "
            "of field, true-to-life colour grading"
        ),
        model="fal-ai/flux-pro",
    ),
    "comic": ImageStyle(
        id="comic",
        name="comic book",
        system_prompt=(
            "Bold comic book panel, heavy ink outlines, halftone shading, "
            "saturated primary colours, dynamic composition"
        ),
        model="fal-ai/nano-banana",
    ),
}

DEFAULT_STYLE_ID = "dark-eerie"


def get_default_image_style() -> ImageStyle:
    return IMAGE_STYLES[DEFAULT_STYLE_ID]


def get_image_style(style_id: Optional[str]) -> ImageStyle:
    """Look up a style by id, falling back to the default style."""
    if style_id and style_id in IMAGE_STYLES:
        return IMAGE_STYLES[style_id]
    return get_default_image_style()


__all__ = ["ImageStyle", "IMAGE_STYLES", "DEFAULT_STYLE_ID", "get_image_style", "get_default_image_style"]
