"""
Transient contracts exchanged between the planner, the media coordinator and
the external providers during one pipeline run.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .captions import WordBatch


@dataclass(frozen=True)
class PlannedSegment:
    text: str
    image_prompt: str


@dataclass
class TranscribedWord:
    word: str
    start: float
    end: float


@dataclass
class TranscriptionResult:
    text: str
    words: List[TranscribedWord] = field(default_factory=list)
    duration: float = 0.0


@dataclass
class GeneratedImage:
    """Raw image backend response: a hosted URL, inline bytes, or an error."""

    success: bool
    image_url: Optional[str] = None
    image_bytes: Optional[bytes] = None
    mime_type: str = "image/jpeg"
    error: Optional[str] = None


@dataclass(frozen=True)
class StoredArtifact:
    key: str
    url: str


@dataclass
class ImageOutcome:
    index: int
    prompt: str
    success: bool
    image_url: Optional[str] = None
    error: Optional[str] = None


@dataclass
class AudioOutcome:
    index: int
    segment_id: str
    audio_url: str
    duration: float
    word_timings: Optional[List[WordBatch]] = None


@dataclass
class MediaGenerationResult:
    """Index-stable outcomes: position ``i`` belongs to segment ``i``."""

    image_results: List[ImageOutcome] = field(default_factory=list)
    audio_results: List[AudioOutcome] = field(default_factory=list)

    @property
    def successful_images(self) -> int:
        return sum(1 for r in self.image_results if r.success)

    @property
    def failed_images(self) -> List[ImageOutcome]:
        return [r for r in self.image_results if not r.success]

    @property
    def total_duration(self) -> float:
        return sum(r.duration for r in self.audio_results)


__all__ = [
    "PlannedSegment",
    "TranscribedWord",
    "TranscriptionResult",
    "GeneratedImage",
    "StoredArtifact",
    "ImageOutcome",
    "AudioOutcome",
    "MediaGenerationResult",
]
