"""
Project aggregate and its persisted children (segments, file records).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .captions import WordBatch
from .status import ProjectStatus


def _now() -> str:
    return datetime.now().isoformat()


@dataclass
class Segment:
    id: str
    project_id: str
    order: int
    text: str
    image_prompt: str
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    duration: float = 0.0
    word_timings: Optional[List[WordBatch]] = None
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "project_id": self.project_id,
            "order": self.order,
            "text": self.text,
            "image_prompt": self.image_prompt,
            "image_url": self.image_url,
            "audio_url": self.audio_url,
            "duration": self.duration,
            "word_timings": (
                [batch.to_dict() for batch in self.word_timings]
                if self.word_timings is not None
                else None
            ),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Segment":
        timings = data.get("word_timings")
        return cls(
            id=data["id"],
            project_id=data["project_id"],
            order=int(data["order"]),
            text=data.get("text", ""),
            image_prompt=data.get("image_prompt", ""),
            image_url=data.get("image_url"),
            audio_url=data.get("audio_url"),
            duration=float(data.get("duration") or 0.0),
            word_timings=[WordBatch.from_dict(b) for b in timings] if timings is not None else None,
            created_at=data.get("created_at", _now()),
            updated_at=data.get("updated_at", _now()),
        )


@dataclass
class FileRecord:
    """Bookkeeping row for one stored artifact."""

    project_id: str
    segment_id: str
    file_type: str
    file_name: str
    original_name: str
    mime_type: str
    file_size: int
    storage_key: str
    url: str
    upload_status: str = "completed"
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: str = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "segment_id": self.segment_id,
            "file_type": self.file_type,
            "file_name": self.file_name,
            "original_name": self.original_name,
            "mime_type": self.mime_type,
            "file_size": self.file_size,
            "storage_key": self.storage_key,
            "url": self.url,
            "upload_status": self.upload_status,
            "metadata": self.metadata,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileRecord":
        return cls(
            project_id=data["project_id"],
            segment_id=data["segment_id"],
            file_type=data["file_type"],
            file_name=data["file_name"],
            original_name=data.get("original_name", data["file_name"]),
            mime_type=data.get("mime_type", "application/octet-stream"),
            file_size=int(data.get("file_size", 0)),
            storage_key=data["storage_key"],
            url=data["url"],
            upload_status=data.get("upload_status", "completed"),
            metadata=data.get("metadata") or {},
            created_at=data.get("created_at", _now()),
        )


@dataclass
class Project:
    id: str
    owner_id: str
    status: ProjectStatus = ProjectStatus.DRAFT
    title: str = ""
    idea: str = ""
    script: Optional[str] = None
    style_id: Optional[str] = None
    duration: float = 0.0
    segment_ids: List[str] = field(default_factory=list)
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "status": self.status.value,
            "title": self.title,
            "idea": self.idea,
            "script": self.script,
            "style_id": self.style_id,
            "duration": self.duration,
            "segment_ids": list(self.segment_ids),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            id=data["id"],
            owner_id=data["owner_id"],
            status=ProjectStatus(data.get("status", "draft")),
            title=data.get("title", ""),
            idea=data.get("idea", ""),
            script=data.get("script"),
            style_id=data.get("style_id"),
            duration=float(data.get("duration") or 0.0),
            segment_ids=list(data.get("segment_ids", [])),
            created_at=data.get("created_at", _now()),
            updated_at=data.get("updated_at", _now()),
        )


__all__ = ["Project", "Segment", "FileRecord"]
