"""
Narration voice catalog (Edge TTS voice ids) grouped by language.
"""

from typing import Any, Dict

VOICES_BY_LANGUAGE: Dict[str, Dict[str, Any]] = {
    "en": {
        "name": "English",
        "voices": {
            "en-US-GuyNeural": {"name": "Guy (US)", "gender": "male"},
            "en-US-JennyNeural": {"name": "Jenny (US)", "gender": "female"},
            "en-GB-RyanNeural": {"name": "Ryan (UK)", "gender": "male"},
            "en-GB-SoniaNeural": {"name": "Sonia (UK)", "gender": "female"},
        },
        "default": "en-US-GuyNeural",
    },
    "fr": {
        "name": "French",
        "voices": {
            "fr-FR-HenriNeural": {"name": "Henri (France)", "gender": "male"},
            "fr-FR-DeniseNeural": {"name": "Denise (France)", "gender": "female"},
        },
        "default": "fr-FR-HenriNeural",
    },
    "auto": {
        "name": "Multilingual (Auto-detect)",
        "voices": {
            "en-US-EmmaMultilingualNeural": {"name": "Emma (Multilingual)", "gender": "female"},
            "en-US-BrianMultilingualNeural": {"name": "Brian (Multilingual)", "gender": "male"},
        },
        "default": "en-US-EmmaMultilingualNeural",
    },
}


def is_known_voice(voice: str) -> bool:
    return any(voice in lang["voices"] for lang in VOICES_BY_LANGUAGE.values())


__all__ = ["VOICES_BY_LANGUAGE", "is_known_voice"]
