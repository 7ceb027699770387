"""
Core Module - Cross-cutting concerns and shared infrastructure

Organization:
    - logging.py: Structured logging configuration and utilities
    - exceptions.py: Application exception hierarchy
    - runtime.py: Environment parsing helpers

Usage:
    from reelsmith.core import get_logger, LogTimer, PlanningError
"""

from .logging import (
    setup_logging,
    get_logger,
    set_request_id,
    set_project_id,
    clear_context,
    LogTimer,
)
from .exceptions import (
    ReelsmithError,
    PipelineError,
    InvalidScriptError,
    PlanningError,
    AudioGenerationError,
    InvalidStatusTransition,
    InfrastructureError,
    ProviderError,
    TranscriptionError,
    StorageError,
    ProjectNotFoundError,
)
from .runtime import parse_bool_env

__all__ = [
    "setup_logging",
    "get_logger",
    "set_request_id",
    "set_project_id",
    "clear_context",
    "LogTimer",
    "ReelsmithError",
    "PipelineError",
    "InvalidScriptError",
    "PlanningError",
    "AudioGenerationError",
    "InvalidStatusTransition",
    "InfrastructureError",
    "ProviderError",
    "TranscriptionError",
    "StorageError",
    "ProjectNotFoundError",
    "parse_bool_env",
]
