from typing import TYPE_CHECKING
from ...domain.repositories.log_repository import LogRepository
from ...application.use_cases.log.list_logs import ListLogsUseCase
from ...application.use_cases.log.add_log import AddLogUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class LogProvider:
    """Log use case provider - registers all detection log use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all log use cases.
        Use cases are created on-demand via factories.
        """
        # Register ListLogsUseCase
        container.register_factory(
            ListLogsUseCase,
            lambda: ListLogsUseCase(
                log_repository=container.get(LogRepository),
            )
        )

        # Register AddLogUseCase
        container.register_factory(
            AddLogUseCase,
            lambda: AddLogUseCase(
                log_repository=container.get(LogRepository),
            )
        )
