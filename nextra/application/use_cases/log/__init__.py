from .list_logs import ListLogsUseCase
from .add_log import AddLogUseCase

__all__ = ["ListLogsUseCase", "AddLogUseCase"]
