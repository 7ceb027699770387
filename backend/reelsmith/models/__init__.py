"""
Data contracts: lifecycle status, domain dataclasses and API schemas.
"""

from .status import ProjectStatus, ALLOWED_TRANSITIONS
from .captions import Word, WordBatch, CaptionWord, CaptionFrame
from .project import Project, Segment, FileRecord
from .media import (
    PlannedSegment,
    TranscribedWord,
    TranscriptionResult,
    GeneratedImage,
    StoredArtifact,
    ImageOutcome,
    AudioOutcome,
    MediaGenerationResult,
)
from .api import (
    CreateVideoRequest,
    CreateVideoResponse,
    BreakScriptRequest,
    BreakScriptResponse,
    ImagePromptsRequest,
    ImagePromptsResponse,
    SegmentResponse,
    TimelineEntryModel,
    ProjectResponse,
    CaptionFrameResponse,
    SubtitlesResponse,
    RegenerateImageRequest,
    RegenerateAudioRequest,
)

__all__ = [
    "ProjectStatus",
    "ALLOWED_TRANSITIONS",
    "Word",
    "WordBatch",
    "CaptionWord",
    "CaptionFrame",
    "Project",
    "Segment",
    "FileRecord",
    "PlannedSegment",
    "TranscribedWord",
    "TranscriptionResult",
    "GeneratedImage",
    "StoredArtifact",
    "ImageOutcome",
    "AudioOutcome",
    "MediaGenerationResult",
    "CreateVideoRequest",
    "CreateVideoResponse",
    "BreakScriptRequest",
    "BreakScriptResponse",
    "ImagePromptsRequest",
    "ImagePromptsResponse",
    "SegmentResponse",
    "TimelineEntryModel",
    "ProjectResponse",
    "CaptionFrameResponse",
    "SubtitlesResponse",
    "RegenerateImageRequest",
    "RegenerateAudioRequest",
]
