"""
VideoCreationUseCase - creates a project from a script and schedules the
generation pipeline in the background.
"""

from datetime import datetime

from fastapi import BackgroundTasks

from reelsmith.config import is_known_voice
from reelsmith.core import InvalidScriptError, get_logger
from reelsmith.models import CreateVideoRequest, CreateVideoResponse
from reelsmith.services.infrastructure.storage import ProjectRepository
from reelsmith.services.pipeline import GenerationParams, PipelineOrchestrator

logger = get_logger(__name__, component="video_creation")

IDEA_PREVIEW_CHARS = 200


class VideoCreationUseCase:
    """Handle project creation and background pipeline execution."""

    def __init__(self, repository: ProjectRepository, orchestrator: PipelineOrchestrator):
        self.repository = repository
        self.orchestrator = orchestrator

    @staticmethod
    def _idea_from_script(script: str) -> str:
        if len(script) <= IDEA_PREVIEW_CHARS:
            return script
        return script[:IDEA_PREVIEW_CHARS] + "..."

    def start(
        self,
        request: CreateVideoRequest,
        background_tasks: BackgroundTasks,
        owner_id: str,
    ) -> CreateVideoResponse:
        """Validate, create the project, mark it generating and enqueue the run."""
        if not request.script or not request.script.strip():
            raise InvalidScriptError("Script is required and must be a non-empty string")
        if not is_known_voice(request.voice):
            logger.warning(f"Voice {request.voice} is not in the catalog, passing it through")

        project = self.repository.create_project(
            owner_id=owner_id,
            title=f"Video Project - {datetime.now().strftime('%Y-%m-%d')}",
            idea=self._idea_from_script(request.script),
            script=request.script,
            style_id=request.style_id,
        )
        self.orchestrator.begin(project.id)

        params = GenerationParams(
            script=request.script,
            style_id=request.style_id,
            image_model=request.image_model,
            voice=request.voice,
        )

        async def run_generation():
            try:
                await self.orchestrator.run(project.id, owner_id, params)
            except Exception as e:  # noqa: BLE001
                # Already marked failed by the orchestrator
                logger.error(
                    f"Background generation for project {project.id} ended with an error: {e}",
                    extra={"project_id": project.id},
                )

        background_tasks.add_task(run_generation)

        return CreateVideoResponse(
            project_id=project.id,
            status="generating",
            message="Video generation started",
        )
