"""
Read-side use cases for polling clients: project status, per-frame captions
and project-wide subtitles.
"""

from dataclasses import dataclass
from typing import Optional

from reelsmith.config import VIDEO_FPS
from reelsmith.core import ProjectNotFoundError
from reelsmith.models import (
    CaptionFrameResponse,
    ProjectResponse,
    Segment,
    SegmentResponse,
    SubtitlesResponse,
    TimelineEntryModel,
)
from reelsmith.services.captions import (
    build_timeline,
    caption_at_frame,
    locate_frame,
    offset_words,
    resolve_caption,
    to_subtitles,
    total_duration,
    total_frames,
    words_in_range,
)
from reelsmith.services.infrastructure.storage import ProjectRepository

from .base import UseCase


@dataclass
class GetProjectRequest:
    project_id: str
    owner_id: str


@dataclass
class CaptionRequest:
    project_id: str
    owner_id: str
    segment_order: int
    time: float


@dataclass
class FrameCaptionRequest:
    project_id: str
    owner_id: str
    frame: int


@dataclass
class SubtitlesRequest:
    project_id: str
    owner_id: str
    words_per_line: int = 8
    start: Optional[float] = None
    end: Optional[float] = None


def _ensure_owner(project, owner_id: str) -> None:
    # Projects of other owners are reported as missing
    if project.owner_id != owner_id:
        raise ProjectNotFoundError(f"Project {project.id} not found")


def segment_response(segment: Segment) -> SegmentResponse:
    return SegmentResponse(
        id=segment.id,
        order=segment.order,
        text=segment.text,
        image_prompt=segment.image_prompt,
        image_url=segment.image_url,
        audio_url=segment.audio_url,
        duration=segment.duration,
        word_timings=(
            [b.to_dict() for b in segment.word_timings]
            if segment.word_timings is not None
            else None
        ),
    )


class GetProjectUseCase(UseCase[GetProjectRequest, ProjectResponse]):

    def __init__(self, repository: ProjectRepository, fps: int = VIDEO_FPS):
        self.repository = repository
        self.fps = fps

    async def execute(self, request: GetProjectRequest) -> ProjectResponse:
        project = self.repository.get_project(request.project_id)
        _ensure_owner(project, request.owner_id)
        segments = self.repository.get_segments(project.id)

        return ProjectResponse(
            id=project.id,
            status=project.status.value,
            title=project.title,
            duration=project.duration,
            total_frames=total_frames(project.duration, self.fps),
            created_at=project.created_at,
            updated_at=project.updated_at,
            segments=[segment_response(s) for s in segments],
            timeline=[
                TimelineEntryModel(
                    segment_id=entry.segment_id,
                    order=entry.order,
                    from_frame=entry.from_frame,
                    duration_in_frames=entry.duration_in_frames,
                )
                for entry in build_timeline(segments, self.fps)
            ],
        )


class ResolveCaptionUseCase(UseCase[CaptionRequest, CaptionFrameResponse]):
    """Caption to draw for one segment at a segment-relative time."""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def execute(self, request: CaptionRequest) -> CaptionFrameResponse:
        project = self.repository.get_project(request.project_id)
        _ensure_owner(project, request.owner_id)

        segment = next(
            (s for s in self.repository.get_segments(project.id) if s.order == request.segment_order),
            None,
        )
        if segment is None:
            raise ProjectNotFoundError(
                f"Project {project.id} has no segment with order {request.segment_order}"
            )

        frame = resolve_caption(segment.word_timings or [], request.time, segment.text)
        return CaptionFrameResponse(
            segment_order=segment.order,
            time=request.time,
            display_text=frame.display_text,
            words=[w.to_dict() for w in frame.words],
        )


class FrameCaptionUseCase(UseCase[FrameCaptionRequest, CaptionFrameResponse]):
    """Caption for an absolute frame of the whole video."""

    def __init__(self, repository: ProjectRepository, fps: int = VIDEO_FPS):
        self.repository = repository
        self.fps = fps

    async def execute(self, request: FrameCaptionRequest) -> CaptionFrameResponse:
        project = self.repository.get_project(request.project_id)
        _ensure_owner(project, request.owner_id)
        segments = self.repository.get_segments(project.id)

        timeline = build_timeline(segments, self.fps)
        located = locate_frame(timeline, request.frame, self.fps)
        if located is None:
            raise ProjectNotFoundError(
                f"Frame {request.frame} is past the end of project {project.id}"
            )

        index, seconds = located
        segment = segments[index]
        relative_frame = request.frame - timeline[index].from_frame
        frame = caption_at_frame(segment, relative_frame, self.fps)
        return CaptionFrameResponse(
            segment_order=segment.order,
            time=seconds,
            frame=request.frame,
            display_text=frame.display_text,
            words=[w.to_dict() for w in frame.words],
        )


class SubtitlesUseCase(UseCase[SubtitlesRequest, SubtitlesResponse]):
    """
    Subtitle lines for the whole project.

    Word timings of each segment are shifted onto one timeline by the
    durations of the segments before it. Segments without timings still
    take up their duration but contribute no lines.
    """

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    async def execute(self, request: SubtitlesRequest) -> SubtitlesResponse:
        project = self.repository.get_project(request.project_id)
        _ensure_owner(project, request.owner_id)
        segments = self.repository.get_segments(project.id)

        words = offset_words(
            [[w for b in (s.word_timings or []) for w in b.words] for s in segments],
            [s.duration for s in segments],
        )
        if request.start is not None or request.end is not None:
            start = request.start if request.start is not None else 0.0
            end = request.end if request.end is not None else total_duration(words)
            words = words_in_range(words, start, end)

        return SubtitlesResponse(
            project_id=project.id,
            duration=total_duration(words),
            lines=[line.to_dict() for line in to_subtitles(words, request.words_per_line)],
        )
