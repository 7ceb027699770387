"""
Caption timing: word batching, per-frame caption resolution and the playback timeline.
"""

from .word_batcher import batch_words, batch_transcription, to_words
from .resolver import resolve_caption
from .timing import estimate_duration, total_duration, words_in_range, offset_words, to_subtitles
from .timeline import TimelineEntry, build_timeline, total_frames, locate_frame, caption_at_frame

__all__ = [
    "batch_words",
    "batch_transcription",
    "to_words",
    "resolve_caption",
    "estimate_duration",
    "total_duration",
    "words_in_range",
    "offset_words",
    "to_subtitles",
    "TimelineEntry",
    "build_timeline",
    "total_frames",
    "locate_frame",
    "caption_at_frame",
]
