"""
Project repository: persistence for projects, their segments and file records.
"""

import json
import os
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional, Sequence

from reelsmith.config import PROJECT_DATA_DIR, env_int
from reelsmith.core import ProjectNotFoundError, StorageError, get_logger
from reelsmith.models import (
    FileRecord,
    PlannedSegment,
    Project,
    ProjectStatus,
    Segment,
    WordBatch,
)
from reelsmith.services.captions.timing import estimate_duration

logger = get_logger(__name__, component="project_repository")

UPDATABLE_SEGMENT_FIELDS = frozenset(
    {"text", "image_prompt", "image_url", "audio_url", "duration", "word_timings"}
)


class ProjectRepository(ABC):
    """
    Abstract interface for project persistence.

    Segment updates are scoped to one segment and to the fields passed, so the
    image writer and the audio writer for the same segment never overwrite
    each other's fields.
    """

    @abstractmethod
    def create_project(
        self,
        owner_id: str,
        title: str = "",
        idea: str = "",
        script: Optional[str] = None,
        style_id: Optional[str] = None,
    ) -> Project:
        """Create a project in ``draft`` status."""
        pass

    @abstractmethod
    def get_project(self, project_id: str) -> Project:
        """
        Raises:
            ProjectNotFoundError: if the project does not exist
        """
        pass

    @abstractmethod
    def list_projects(self, owner_id: Optional[str] = None) -> List[Project]:
        pass

    @abstractmethod
    def update_project(
        self,
        project_id: str,
        *,
        status: Optional[ProjectStatus] = None,
        duration: Optional[float] = None,
        script: Optional[str] = None,
        style_id: Optional[str] = None,
    ) -> Project:
        """
        Apply the given fields. Status changes must follow the project lifecycle.

        Raises:
            ProjectNotFoundError: if the project does not exist
            InvalidStatusTransition: if the status change is not allowed
        """
        pass

    @abstractmethod
    def create_segments_batch(
        self,
        project_id: str,
        planned: Sequence[PlannedSegment],
    ) -> List[Segment]:
        """Create one segment per planned chunk with ``order`` 0..N-1."""
        pass

    @abstractmethod
    def get_segments(self, project_id: str) -> List[Segment]:
        """Segments ordered by ``order``."""
        pass

    @abstractmethod
    def update_segment(self, segment_id: str, **fields: Any) -> Segment:
        """
        Merge ``fields`` into a single segment.

        Raises:
            ValueError: for fields that cannot be updated
            ProjectNotFoundError: if the segment does not exist
        """
        pass

    @abstractmethod
    def create_file_record(self, record: FileRecord) -> FileRecord:
        pass

    @abstractmethod
    def list_file_records(self, project_id: str) -> List[FileRecord]:
        pass


@dataclass
class _ProjectDocument:
    """Everything stored for one project; one JSON file on disk."""

    project: Project
    segments: List[Segment] = field(default_factory=list)
    files: List[FileRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project": self.project.to_dict(),
            "segments": [s.to_dict() for s in self.segments],
            "files": [f.to_dict() for f in self.files],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "_ProjectDocument":
        return cls(
            project=Project.from_dict(data["project"]),
            segments=[Segment.from_dict(s) for s in data.get("segments", [])],
            files=[FileRecord.from_dict(f) for f in data.get("files", [])],
        )


class FileBasedProjectRepository(ProjectRepository):
    """Disk-first project store with a bounded in-memory cache."""

    def __init__(self, storage_dir: Optional[Path] = None, cache_limit: Optional[int] = None):
        self._storage_dir = Path(storage_dir) if storage_dir else PROJECT_DATA_DIR
        self._storage_dir.mkdir(parents=True, exist_ok=True)
        self._cache_limit = (
            cache_limit if cache_limit is not None else env_int("PROJECT_CACHE_LIMIT", 200, 10)
        )

        self._documents: Dict[str, _ProjectDocument] = {}
        self._segment_index: Dict[str, str] = {}
        self._known_project_ids: set = set()
        self._lock = RLock()

        self._index_projects()

    # ---- internals -------------------------------------------------------

    def _index_projects(self) -> None:
        with self._lock:
            self._known_project_ids = {p.stem for p in self._storage_dir.glob("*.json")}

    def _project_file(self, project_id: str) -> Path:
        return self._storage_dir / f"{project_id}.json"

    def _load_document(self, project_id: str) -> Optional[_ProjectDocument]:
        project_file = self._project_file(project_id)
        if not project_file.exists():
            return None
        try:
            with open(project_file, "r", encoding="utf-8") as f:
                return _ProjectDocument.from_dict(json.load(f))
        except (OSError, ValueError, KeyError) as e:
            logger.error(f"Error loading project {project_id}: {e}")
            return None

    def _save_document(self, document: _ProjectDocument) -> None:
        project_id = document.project.id
        project_file = self._project_file(project_id)
        tmp_file = project_file.with_suffix(".json.tmp")
        try:
            with open(tmp_file, "w", encoding="utf-8") as f:
                json.dump(document.to_dict(), f, indent=2, ensure_ascii=False)
            os.replace(tmp_file, project_file)
        except OSError as e:
            raise StorageError(f"Failed to save project {project_id}: {e}") from e
        self._known_project_ids.add(project_id)

    def _cache_document(self, document: _ProjectDocument) -> None:
        self._documents[document.project.id] = document
        for segment in document.segments:
            self._segment_index[segment.id] = document.project.id
        self._prune_cache()

    def _prune_cache(self) -> None:
        if len(self._documents) <= self._cache_limit:
            return
        evictable = [
            pid for pid, doc in self._documents.items()
            if doc.project.status != ProjectStatus.GENERATING
        ]
        evictable.sort(key=lambda pid: self._documents[pid].project.updated_at)
        while len(self._documents) > self._cache_limit and evictable:
            self._documents.pop(evictable.pop(0), None)

    def _get_document(self, project_id: str) -> _ProjectDocument:
        document = self._documents.get(project_id)
        if document:
            return document
        if project_id in self._known_project_ids:
            document = self._load_document(project_id)
            if document:
                self._cache_document(document)
                return document
        raise ProjectNotFoundError(f"Project {project_id} not found")

    def _find_segment(self, segment_id: str) -> tuple:
        project_id = self._segment_index.get(segment_id)
        candidates = [project_id] if project_id else sorted(self._known_project_ids)
        for pid in candidates:
            try:
                document = self._get_document(pid)
            except ProjectNotFoundError:
                continue
            for segment in document.segments:
                if segment.id == segment_id:
                    return document, segment
        raise ProjectNotFoundError(f"Segment {segment_id} not found")

    @staticmethod
    def _now() -> str:
        return datetime.now().isoformat()

    # ---- projects --------------------------------------------------------

    def create_project(
        self,
        owner_id: str,
        title: str = "",
        idea: str = "",
        script: Optional[str] = None,
        style_id: Optional[str] = None,
    ) -> Project:
        with self._lock:
            project = Project(
                id=str(uuid.uuid4()),
                owner_id=owner_id,
                title=title,
                idea=idea,
                script=script,
                style_id=style_id,
            )
            document = _ProjectDocument(project=project)
            self._save_document(document)
            self._cache_document(document)
            return project

    def get_project(self, project_id: str) -> Project:
        with self._lock:
            return self._get_document(project_id).project

    def list_projects(self, owner_id: Optional[str] = None) -> List[Project]:
        with self._lock:
            project_ids = sorted(self._known_project_ids)
            projects = []
            for project_id in project_ids:
                try:
                    project = self._get_document(project_id).project
                except ProjectNotFoundError:
                    continue
                if owner_id is None or project.owner_id == owner_id:
                    projects.append(project)
        projects.sort(key=lambda p: p.created_at, reverse=True)
        return projects

    def update_project(
        self,
        project_id: str,
        *,
        status: Optional[ProjectStatus] = None,
        duration: Optional[float] = None,
        script: Optional[str] = None,
        style_id: Optional[str] = None,
    ) -> Project:
        with self._lock:
            document = self._get_document(project_id)
            project = document.project

            if status is not None:
                project.status.ensure_transition(status)
                project.status = status
            if duration is not None:
                project.duration = float(duration)
            if script is not None:
                project.script = script
            if style_id is not None:
                project.style_id = style_id

            project.updated_at = self._now()
            self._save_document(document)
            return project

    # ---- segments --------------------------------------------------------

    def create_segments_batch(
        self,
        project_id: str,
        planned: Sequence[PlannedSegment],
    ) -> List[Segment]:
        with self._lock:
            document = self._get_document(project_id)
            if document.segments:
                raise StorageError(f"Project {project_id} already has segments")

            segments = [
                Segment(
                    id=str(uuid.uuid4()),
                    project_id=project_id,
                    order=order,
                    text=item.text,
                    image_prompt=item.image_prompt,
                    duration=estimate_duration(item.text),
                )
                for order, item in enumerate(planned)
            ]
            document.segments = segments
            document.project.segment_ids = [s.id for s in segments]
            document.project.updated_at = self._now()
            self._save_document(document)
            self._cache_document(document)
            return list(segments)

    def get_segments(self, project_id: str) -> List[Segment]:
        with self._lock:
            document = self._get_document(project_id)
            return sorted(document.segments, key=lambda s: s.order)

    def update_segment(self, segment_id: str, **fields: Any) -> Segment:
        unknown = set(fields) - UPDATABLE_SEGMENT_FIELDS
        if unknown:
            raise ValueError(f"Cannot update segment fields: {', '.join(sorted(unknown))}")

        with self._lock:
            document, segment = self._find_segment(segment_id)
            for name, value in fields.items():
                if name == "word_timings" and value is not None:
                    value = [
                        batch if isinstance(batch, WordBatch) else WordBatch.from_dict(batch)
                        for batch in value
                    ]
                elif name == "duration" and value is not None:
                    value = float(value)
                setattr(segment, name, value)
            segment.updated_at = self._now()
            self._save_document(document)
            return segment

    # ---- file records ----------------------------------------------------

    def create_file_record(self, record: FileRecord) -> FileRecord:
        with self._lock:
            document = self._get_document(record.project_id)
            document.files.append(record)
            self._save_document(document)
            return record

    def list_file_records(self, project_id: str) -> List[FileRecord]:
        with self._lock:
            return list(self._get_document(project_id).files)


_repository_instance: Optional[FileBasedProjectRepository] = None


def get_project_repository() -> FileBasedProjectRepository:
    """Get the shared repository instance (singleton pattern)."""
    global _repository_instance
    if _repository_instance is None:
        _repository_instance = FileBasedProjectRepository()
    return _repository_instance
