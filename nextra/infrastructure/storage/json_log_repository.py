# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# Local application imports
from ...core.exceptions import StorageReadError, ValidationError
from ...domain.constants import LogFields
from ...domain.models.log_entry import LogEntry
from ...domain.repositories.log_repository import LogRepository
from .json_array_file import JsonArrayFile
from .storage_connection import get_logs_file

logger = logging.getLogger(__name__)


class JsonLogRepository(LogRepository):
    """JSON file implementation of LogRepository"""

    def __init__(self, logs_file: Optional[JsonArrayFile] = None) -> None:
        self.logs_file = logs_file if logs_file is not None else get_logs_file()

    async def list_logs(self) -> List[LogEntry]:
        """Return every stored log entry in insertion order"""
        records = await self.logs_file.read()
        return [self._record_to_log(record) for record in records]

    async def append_log(self, entry: LogEntry) -> LogEntry:
        """Append an entry at the end of the collection"""
        record = self._log_to_record(entry)
        await self.logs_file.update(lambda records: records + [record])
        logger.info(f"Log appended for {entry.name!r} at {entry.time!r}")
        return entry

    def _record_to_log(self, record: Any) -> LogEntry:
        """Convert stored record to LogEntry domain model"""
        if not isinstance(record, dict):
            raise StorageReadError(f"Invalid log record in {self.logs_file.path}: {record!r}")
        try:
            return LogEntry(
                name=record.get(LogFields.NAME),
                time=record.get(LogFields.TIME),
                gait=record.get(LogFields.GAIT),
                auth=record.get(LogFields.AUTH),
                status=record.get(LogFields.STATUS),
            )
        except ValidationError as e:
            raise StorageReadError(f"Invalid log record in {self.logs_file.path}: {e.message}") from e

    def _log_to_record(self, entry: LogEntry) -> Dict[str, Any]:
        """Convert LogEntry domain model to stored record"""
        return {
            LogFields.NAME: entry.name,
            LogFields.GAIT: entry.gait,
            LogFields.AUTH: entry.auth,
            LogFields.STATUS: entry.status,
            LogFields.TIME: entry.time,
        }
