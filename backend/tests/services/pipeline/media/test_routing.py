import pytest

from reelsmith.config import IMAGE_STYLES
from reelsmith.services.pipeline.media.routing import (
    FAL_BACKEND,
    GEMINI_BACKEND,
    enhance_prompt,
    resolve_image_model,
    select_backend,
)


@pytest.mark.parametrize("style_id,expected", [
    ("dark-eerie", "flux-schnell"),
    ("anime", "flux-dev"),
    ("photoreal", "flux-pro"),
    ("comic", "nano-banana"),
])
def test_model_follows_style(style_id, expected):
    assert resolve_image_model(None, IMAGE_STYLES[style_id]) == expected


def test_explicit_model_wins():
    assert resolve_image_model("imagen-4.0-generate-001", IMAGE_STYLES["anime"]) == "imagen-4.0-generate-001"


def test_no_style_uses_default_model():
    assert resolve_image_model(None, None) == "flux-schnell"


@pytest.mark.parametrize("model,backend", [
    ("flux-schnell", FAL_BACKEND),
    ("nano-banana", FAL_BACKEND),
    ("imagen-4.0-fast-generate-001", GEMINI_BACKEND),
    ("imagen-5-preview", GEMINI_BACKEND),
])
def test_select_backend(model, backend):
    assert select_backend(model) == backend


def test_enhance_prompt_prefixes_style():
    style = IMAGE_STYLES["comic"]
    assert enhance_prompt("a fox", style) == f"{style.system_prompt}. a fox"
    assert enhance_prompt("a fox", None) == "a fox"
