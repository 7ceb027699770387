"""
Core Exceptions
Standardized base exceptions for the application.
"""


class ReelsmithError(Exception):
    """Base exception for all application errors."""
    pass


class PipelineError(ReelsmithError):
    """Base exception for generation pipeline errors."""
    pass


class InvalidScriptError(PipelineError, ValueError):
    """The submitted script is empty or not a string."""
    pass


class PlanningError(PipelineError):
    """Script segmentation or prompt generation produced unusable output."""
    pass


class AudioGenerationError(PipelineError):
    """Narration synthesis failed; the run cannot establish segment timing."""
    pass


class InvalidStatusTransition(PipelineError):
    """A project status change that the lifecycle does not allow."""

    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot move project from '{current}' to '{target}'")
        self.current = current
        self.target = target


class InfrastructureError(ReelsmithError):
    """Base exception for infrastructure errors (LLM, storage, providers)."""
    pass


class ProviderError(InfrastructureError):
    """An external generation provider returned an error."""
    pass


class TranscriptionError(InfrastructureError):
    """Word-level transcription failed or returned an invalid payload."""
    pass


class StorageError(InfrastructureError):
    """Artifact upload or record bookkeeping failed."""
    pass


class ProjectNotFoundError(InfrastructureError, LookupError):
    """No project or segment with the requested id exists."""
    pass
