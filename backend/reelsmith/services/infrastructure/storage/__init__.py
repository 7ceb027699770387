"""
Storage Module - project persistence and artifact storage
"""

from .artifact_store import ArtifactStore, LocalArtifactStore
from .project_repository import (
    ProjectRepository,
    FileBasedProjectRepository,
    UPDATABLE_SEGMENT_FIELDS,
    get_project_repository,
)

__all__ = [
    "ArtifactStore",
    "LocalArtifactStore",
    "ProjectRepository",
    "FileBasedProjectRepository",
    "UPDATABLE_SEGMENT_FIELDS",
    "get_project_repository",
]
