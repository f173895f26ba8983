from abc import ABC, abstractmethod
from typing import List
from ..models.log_entry import LogEntry


class LogRepository(ABC):
    """Repository interface - defines contract for detection log data access"""

    @abstractmethod
    async def list_logs(self) -> List[LogEntry]:
        """Return every stored log entry in insertion order"""
        pass

    @abstractmethod
    async def append_log(self, entry: LogEntry) -> LogEntry:
        """Append an entry at the end of the collection"""
        pass
