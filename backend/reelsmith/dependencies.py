"""
Service wiring for the HTTP layer.

Each getter builds its service once; tests replace them through
``app.dependency_overrides``.
"""

from functools import lru_cache

from .services.infrastructure.llm import GeminiProvider, create_gemini_client
from .services.infrastructure.media import (
    EdgeSpeechSynthesizer,
    FalImageBackend,
    GeminiImageBackend,
    GeminiTranscriber,
)
from .services.infrastructure.storage import (
    FileBasedProjectRepository,
    LocalArtifactStore,
    get_project_repository,
)
from .services.pipeline import PipelineOrchestrator
from .services.pipeline.media import FAL_BACKEND, GEMINI_BACKEND, MediaGenerationCoordinator
from .services.pipeline.planning import SegmentPlanner
from .services.use_cases import (
    FrameCaptionUseCase,
    GetProjectUseCase,
    RegenerateSegmentMediaUseCase,
    ResolveCaptionUseCase,
    SubtitlesUseCase,
    VideoCreationUseCase,
)


@lru_cache(maxsize=1)
def get_repository() -> FileBasedProjectRepository:
    return get_project_repository()


@lru_cache(maxsize=1)
def get_llm_provider() -> GeminiProvider:
    return GeminiProvider(client=create_gemini_client())


@lru_cache(maxsize=1)
def get_planner() -> SegmentPlanner:
    return SegmentPlanner(get_llm_provider())


@lru_cache(maxsize=1)
def get_coordinator() -> MediaGenerationCoordinator:
    llm = get_llm_provider()
    return MediaGenerationCoordinator(
        image_backends={
            FAL_BACKEND: FalImageBackend(),
            GEMINI_BACKEND: GeminiImageBackend(client=llm.client),
        },
        speech=EdgeSpeechSynthesizer(),
        transcriber=GeminiTranscriber(llm),
        artifacts=LocalArtifactStore(),
        repository=get_repository(),
    )


@lru_cache(maxsize=1)
def get_orchestrator() -> PipelineOrchestrator:
    return PipelineOrchestrator(get_repository(), get_planner(), get_coordinator())


def get_video_creation_use_case() -> VideoCreationUseCase:
    return VideoCreationUseCase(get_repository(), get_orchestrator())


def get_project_use_case() -> GetProjectUseCase:
    return GetProjectUseCase(get_repository())


def get_caption_use_case() -> ResolveCaptionUseCase:
    return ResolveCaptionUseCase(get_repository())


def get_frame_caption_use_case() -> FrameCaptionUseCase:
    return FrameCaptionUseCase(get_repository())


def get_subtitles_use_case() -> SubtitlesUseCase:
    return SubtitlesUseCase(get_repository())


def get_segment_regeneration_use_case() -> RegenerateSegmentMediaUseCase:
    return RegenerateSegmentMediaUseCase(get_repository(), get_coordinator())
