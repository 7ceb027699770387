"""
Playback timeline: maps segments onto frame ranges at a fixed frame rate.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from reelsmith.config import VIDEO_FPS
from reelsmith.models import CaptionFrame, Segment

from .resolver import resolve_caption


@dataclass(frozen=True)
class TimelineEntry:
    segment_id: str
    order: int
    from_frame: int
    duration_in_frames: int

    @property
    def end_frame(self) -> int:
        return self.from_frame + self.duration_in_frames


def total_frames(duration: float, fps: int = VIDEO_FPS) -> int:
    return round(duration * fps)


def build_timeline(segments: Sequence[Segment], fps: int = VIDEO_FPS) -> List[TimelineEntry]:
    """Lay segments end to end in ``order``."""
    timeline: List[TimelineEntry] = []
    cursor = 0
    for segment in sorted(segments, key=lambda s: s.order):
        frames = total_frames(segment.duration, fps)
        timeline.append(
            TimelineEntry(
                segment_id=segment.id,
                order=segment.order,
                from_frame=cursor,
                duration_in_frames=frames,
            )
        )
        cursor += frames
    return timeline


def locate_frame(
    timeline: Sequence[TimelineEntry],
    frame: int,
    fps: int = VIDEO_FPS,
) -> Optional[Tuple[int, float]]:
    """Return ``(timeline index, segment-relative seconds)`` or None past the end."""
    for index, entry in enumerate(timeline):
        if entry.from_frame <= frame < entry.end_frame:
            return index, (frame - entry.from_frame) / fps
    return None


def caption_at_frame(segment: Segment, frame: int, fps: int = VIDEO_FPS) -> CaptionFrame:
    """Caption for a segment-relative frame number."""
    return resolve_caption(segment.word_timings or [], frame / fps, segment.text)
