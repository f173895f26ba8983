"""
File-backed JSON array collection.

Each collection (logs, verified users) lives in a single JSON file whose
content is always a JSON array. Every mutation is a full read, an in-memory
change and a full overwrite. Overwrites go through a temporary sibling file
that is renamed over the target, so readers never see a half-written file.

Read-modify-write cycles are serialized per file with an asyncio.Lock. This
removes lost updates between concurrent requests of the same process; it
does not coordinate separate processes writing the same file.
"""
# Standard library imports
import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

# Local application imports
from ...core.exceptions import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class JsonArrayFile:
    """A JSON array persisted in one file"""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock: Optional[asyncio.Lock] = None

    @property
    def lock(self) -> asyncio.Lock:
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    def ensure_exists(self) -> None:
        """Create the parent directory and an empty array if the file is missing"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text("[]", encoding="utf-8")
            logger.info(f"Initialized empty collection at {self.path}")

    async def read(self) -> List[Record]:
        """Read the full array"""
        return await asyncio.to_thread(self._read_sync)

    async def update(self, mutate: Callable[[List[Record]], List[Record]]) -> List[Record]:
        """
        Read the array, apply `mutate` and write the result back.

        Args:
            mutate: Function receiving the current records and returning the new ones

        Returns:
            The records that were written

        Raises:
            StorageReadError: If the current content cannot be read
            StorageWriteError: If the new content cannot be written
        """
        async with self.lock:
            records = await asyncio.to_thread(self._read_sync)
            updated = mutate(records)
            await asyncio.to_thread(self._write_sync, updated)
            return updated

    def _read_sync(self) -> List[Record]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageReadError(f"Cannot read {self.path}: {e}") from e

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise StorageReadError(f"Invalid JSON in {self.path}: {e}") from e

        if not isinstance(data, list):
            raise StorageReadError(f"Expected a JSON array in {self.path}, got {type(data).__name__}")
        return data

    def _write_sync(self, records: List[Record]) -> None:
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageWriteError(f"Cannot write {self.path}: {e}") from e
