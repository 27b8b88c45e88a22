"""Key-value blob stores backing the WorkoutStore.

A blob is any JSON-serialisable value. Each ``save`` replaces the value for
its key as a single unit; there are no partial updates.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    def load(self, key: str) -> Any | None:
        """Return the blob stored under *key*, or None if absent."""
        ...

    def save(self, key: str, value: Any) -> None:
        """Replace the blob stored under *key*."""
        ...


class InMemoryBlobStore:
    """Process-local blob store (tests, ephemeral sessions)."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._blobs: dict[str, str] = {
            k: json.dumps(v) for k, v in (initial or {}).items()
        }

    def load(self, key: str) -> Any | None:
        raw = self._blobs.get(key)
        return json.loads(raw) if raw is not None else None

    def save(self, key: str, value: Any) -> None:
        self._blobs[key] = json.dumps(value)


class JsonFileBlobStore:
    """Blob store persisted as a single JSON document on disk.

    Writes go to a temp file in the same directory and are moved into place
    with ``os.replace`` so a crash never leaves a half-written document.
    Concurrent writers are not coordinated: the last save wins.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self, key: str) -> Any | None:
        return self._read_all().get(key)

    def save(self, key: str, value: Any) -> None:
        document = self._read_all()
        document[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=self._path.name, suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved blob %r to %s", key, self._path)

    def _read_all(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        with open(self._path, encoding="utf-8") as f:
            document = json.load(f)
        if not isinstance(document, dict):
            raise ValueError(f"Blob store at {self._path} is not a JSON object")
        return document
