# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.log_repository import LogRepository
from ...dto.log_dto import LogResponse


class ListLogsUseCase:
    """Use case for listing every detection log"""

    def __init__(
        self,
        log_repository: LogRepository,
    ) -> None:
        self.log_repository = log_repository

    async def execute(self) -> List[LogResponse]:
        """
        List all detection logs in insertion order

        Returns:
            List of LogResponse objects

        Raises:
            StorageReadError: If the log collection cannot be read
        """
        logs = await self.log_repository.list_logs()

        return [
            LogResponse(
                name=log.name,
                gait=log.gait,
                auth=log.auth,
                status=log.status,
                time=log.time,
            )
            for log in logs
        ]
