"""
Use cases - business operations independent of HTTP
"""

from .base import UseCase
from .video_creation_use_case import VideoCreationUseCase
from .project_query_use_cases import (
    CaptionRequest,
    FrameCaptionRequest,
    FrameCaptionUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    ResolveCaptionUseCase,
    SubtitlesRequest,
    SubtitlesUseCase,
)
from .segment_regeneration_use_case import (
    RegenerateAudioCommand,
    RegenerateImageCommand,
    RegenerateSegmentMediaUseCase,
)

__all__ = [
    "UseCase",
    "VideoCreationUseCase",
    "CaptionRequest",
    "FrameCaptionRequest",
    "FrameCaptionUseCase",
    "GetProjectRequest",
    "GetProjectUseCase",
    "ResolveCaptionUseCase",
    "SubtitlesRequest",
    "SubtitlesUseCase",
    "RegenerateAudioCommand",
    "RegenerateImageCommand",
    "RegenerateSegmentMediaUseCase",
]
