"""
Artifact storage for generated media.
"""

import asyncio
import re
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from reelsmith.config import OUTPUT_DIR, PUBLIC_OUTPUT_URL
from reelsmith.core import StorageError, get_logger
from reelsmith.models import StoredArtifact

logger = get_logger(__name__, component="artifact_store")

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def _safe(part: str) -> str:
    return _UNSAFE_CHARS.sub("_", part) or "_"


class ArtifactStore(ABC):
    """Durable storage for generated bytes, addressed by key."""

    @abstractmethod
    async def upload(
        self,
        data: bytes,
        owner_id: str,
        project_id: str,
        index: int,
        segment_id: str,
        kind: str,
        extension: str,
    ) -> StoredArtifact:
        """Store ``data`` and return its key and public URL.

        Raises:
            StorageError: if the bytes could not be stored
        """
        pass

    @staticmethod
    def build_key(
        owner_id: str,
        project_id: str,
        index: int,
        segment_id: str,
        kind: str,
        extension: str,
    ) -> str:
        timestamp = int(time.time() * 1000)
        return "/".join([
            _safe(owner_id),
            _safe(project_id),
            _safe(segment_id),
            _safe(kind),
            f"{_safe(kind)}_{index}_{timestamp}.{extension.lstrip('.')}",
        ])


class LocalArtifactStore(ArtifactStore):
    """Writes artifacts below a directory that is served as static files."""

    def __init__(self, root: Optional[Path] = None, public_url: Optional[str] = None):
        self.root = Path(root) if root else OUTPUT_DIR
        self.public_url = (public_url if public_url is not None else PUBLIC_OUTPUT_URL).rstrip("/")

    def path_for(self, key: str) -> Path:
        return self.root / key

    def url_for(self, key: str) -> str:
        return f"{self.public_url}/{key}"

    def _write(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    async def upload(
        self,
        data: bytes,
        owner_id: str,
        project_id: str,
        index: int,
        segment_id: str,
        kind: str,
        extension: str,
    ) -> StoredArtifact:
        key = self.build_key(owner_id, project_id, index, segment_id, kind, extension)
        path = self.path_for(key)
        try:
            await asyncio.to_thread(self._write, path, data)
        except OSError as e:
            raise StorageError(f"Failed to store {kind} for segment {segment_id}: {e}") from e

        logger.debug("Stored artifact", extra={"key": key, "size_bytes": len(data)})
        return StoredArtifact(key=key, url=self.url_for(key))
