"""
Pipeline Orchestrator - drives one project from submitted script to
completed (or failed) media.

    draft --begin()--> generating --run() succeeds--> completed
                                  --run() raises----> failed

begin() is synchronous and must happen before any generation work so a
client polling right after submission sees ``generating``. run() is not
retried and must be invoked at most once per submission.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from reelsmith.config import DEFAULT_VOICE
from reelsmith.core import LogTimer, get_logger, set_project_id
from reelsmith.models import MediaGenerationResult, Project, ProjectStatus, Segment
from reelsmith.services.infrastructure.storage import ProjectRepository

from .media import MediaGenerationCoordinator
from .planning import SegmentPlanner

logger = get_logger(__name__, component="orchestrator")


@dataclass
class GenerationParams:
    script: str
    style_id: Optional[str] = None
    image_model: Optional[str] = None
    voice: str = DEFAULT_VOICE


class PipelineOrchestrator:

    def __init__(
        self,
        repository: ProjectRepository,
        planner: SegmentPlanner,
        coordinator: MediaGenerationCoordinator,
    ):
        self.repository = repository
        self.planner = planner
        self.coordinator = coordinator

    def begin(self, project_id: str) -> Project:
        """Move the project to ``generating``."""
        project = self.repository.update_project(project_id, status=ProjectStatus.GENERATING)
        logger.info("Project generation started", extra={"project_id": project_id})
        return project

    async def run(self, project_id: str, owner_id: str, params: GenerationParams) -> Project:
        """
        Plan, persist segments, generate media, reconcile and finish.

        Any exception marks the project ``failed`` (best effort) and is re-raised.
        """
        set_project_id(project_id)
        try:
            with LogTimer(logger, "planning"):
                planned = await self.planner.plan(params.script, style_id=params.style_id)

            with LogTimer(logger, "segment persistence"):
                segments = self.repository.create_segments_batch(project_id, planned)
            segment_ids = [s.id for s in segments]

            with LogTimer(logger, "media generation"):
                media = await self.coordinator.generate(
                    planned,
                    segment_ids,
                    params.voice,
                    params.style_id,
                    owner_id=owner_id,
                    project_id=project_id,
                    image_model=params.image_model,
                )

            with LogTimer(logger, "reconciliation"):
                self._reconcile(segment_ids, media)

            total_duration = self._total_duration(self.repository.get_segments(project_id))
            project = self.repository.update_project(
                project_id,
                duration=total_duration,
                status=ProjectStatus.COMPLETED,
            )
            logger.info(
                "Project generation completed",
                extra={
                    "segment_count": len(segment_ids),
                    "total_duration": total_duration,
                    "failed_images": len(media.failed_images),
                },
            )
            return project

        except Exception as e:
            logger.error(f"Project generation failed: {e}", exc_info=True)
            self._mark_failed(project_id)
            raise

    def _reconcile(self, segment_ids: Sequence[str], media: MediaGenerationResult) -> None:
        # Image and audio fields are written in separate, field-scoped updates
        for outcome in media.image_results:
            if outcome.success and outcome.image_url:
                self.repository.update_segment(segment_ids[outcome.index], image_url=outcome.image_url)

        for outcome in media.audio_results:
            fields = {"audio_url": outcome.audio_url, "duration": outcome.duration}
            if outcome.word_timings is not None:
                fields["word_timings"] = outcome.word_timings
            self.repository.update_segment(segment_ids[outcome.index], **fields)

    @staticmethod
    def _total_duration(segments: List[Segment]) -> float:
        return sum(s.duration for s in segments)

    def _mark_failed(self, project_id: str) -> None:
        try:
            self.repository.update_project(project_id, status=ProjectStatus.FAILED)
        except Exception as e:
            # Project stays in generating; pollers treat it as stale
            logger.error(f"Could not mark project as failed: {e}", extra={"project_id": project_id})
