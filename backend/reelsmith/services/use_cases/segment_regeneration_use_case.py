"""
RegenerateSegmentMediaUseCase - replaces the image or the narration of one
segment of an existing project.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from reelsmith.config import DEFAULT_VOICE
from reelsmith.core import ProjectNotFoundError, ProviderError, get_logger
from reelsmith.models import Project, Segment, SegmentResponse
from reelsmith.services.infrastructure.storage import ProjectRepository
from reelsmith.services.pipeline.media import MediaGenerationCoordinator

from .project_query_use_cases import segment_response

logger = get_logger(__name__, component="segment_regeneration")


@dataclass
class RegenerateImageCommand:
    project_id: str
    owner_id: str
    segment_id: str
    image_prompt: Optional[str] = None
    style_id: Optional[str] = None
    image_model: Optional[str] = None


@dataclass
class RegenerateAudioCommand:
    project_id: str
    owner_id: str
    segment_id: str
    text: Optional[str] = None
    voice: str = DEFAULT_VOICE


class RegenerateSegmentMediaUseCase:
    """
    Single-asset regeneration for a segment.

    A new prompt or text replaces the stored one only once the new asset was
    produced, so a failed attempt leaves the segment untouched.
    """

    def __init__(self, repository: ProjectRepository, coordinator: MediaGenerationCoordinator):
        self.repository = repository
        self.coordinator = coordinator

    def _load(self, project_id: str, owner_id: str, segment_id: str) -> Tuple[Project, Segment]:
        project = self.repository.get_project(project_id)
        if project.owner_id != owner_id:
            raise ProjectNotFoundError(f"Project {project_id} not found")

        segment = next(
            (s for s in self.repository.get_segments(project.id) if s.id == segment_id),
            None,
        )
        if segment is None:
            raise ProjectNotFoundError(f"Project {project_id} has no segment {segment_id}")
        return project, segment

    async def regenerate_image(self, command: RegenerateImageCommand) -> SegmentResponse:
        """
        Raises:
            ProjectNotFoundError: unknown project or segment, or another owner's project
            ProviderError: if no image could be produced
        """
        project, segment = self._load(command.project_id, command.owner_id, command.segment_id)
        prompt = command.image_prompt or segment.image_prompt

        outcome = await self.coordinator.generate_single_image(
            prompt,
            segment.id,
            segment.order,
            owner_id=project.owner_id,
            project_id=project.id,
            style_id=command.style_id or project.style_id,
            image_model=command.image_model,
        )
        if not outcome.success:
            raise ProviderError(outcome.error or "No image generated")

        fields = {"image_url": outcome.image_url}
        if command.image_prompt:
            fields["image_prompt"] = command.image_prompt
        updated = self.repository.update_segment(segment.id, **fields)

        logger.info(
            f"Image regenerated for segment {segment.order}",
            extra={"project_id": project.id, "segment_id": segment.id},
        )
        return segment_response(updated)

    async def regenerate_audio(self, command: RegenerateAudioCommand) -> SegmentResponse:
        """
        Narrate the segment again and refresh its duration and word timings.

        The project duration is recomputed from its segments afterwards.

        Raises:
            ProjectNotFoundError: unknown project or segment, or another owner's project
            AudioGenerationError: if narration could not be produced
            StorageError: if the audio could not be stored
        """
        project, segment = self._load(command.project_id, command.owner_id, command.segment_id)
        text = command.text or segment.text

        outcome = await self.coordinator.generate_single_audio(
            text,
            segment.id,
            segment.order,
            command.voice,
            owner_id=project.owner_id,
            project_id=project.id,
        )

        fields = {
            "audio_url": outcome.audio_url,
            "duration": outcome.duration,
            # Timings of the previous narration no longer apply
            "word_timings": outcome.word_timings,
        }
        if command.text:
            fields["text"] = command.text
        updated = self.repository.update_segment(segment.id, **fields)

        total = sum(s.duration for s in self.repository.get_segments(project.id))
        self.repository.update_project(project.id, duration=total)

        logger.info(
            f"Audio regenerated for segment {segment.order}",
            extra={"project_id": project.id, "segment_id": segment.id, "audio_duration": outcome.duration},
        )
        return segment_response(updated)
