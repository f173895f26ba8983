# Standard library imports
import logging

# Local application imports
from ....domain.repositories.log_repository import LogRepository
from ....domain.models.log_entry import LogEntry
from ...dto.log_dto import LogCreateRequest, LogResponse, LogSavedResponse

logger = logging.getLogger(__name__)


class AddLogUseCase:
    """Use case for recording a detection log"""

    def __init__(
        self,
        log_repository: LogRepository,
    ) -> None:
        self.log_repository = log_repository

    async def execute(self, request: LogCreateRequest) -> LogSavedResponse:
        """
        Append a detection log

        Args:
            request: Log fields sent by the client

        Returns:
            LogSavedResponse with the stored log

        Raises:
            ValidationError: If name or time is missing (nothing is written)
            StorageError: If the log collection cannot be read or written
        """
        # Domain validation runs before the collection is touched
        entry = LogEntry(
            name=request.name,
            time=request.time,
            gait=request.gait,
            auth=request.auth,
            status=request.status,
        )

        saved = await self.log_repository.append_log(entry)

        return LogSavedResponse(
            message="Log saved successfully!",
            log=LogResponse(
                name=saved.name,
                gait=saved.gait,
                auth=saved.auth,
                status=saved.status,
                time=saved.time,
            ),
        )
