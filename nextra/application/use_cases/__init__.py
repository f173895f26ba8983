from .log import (
    ListLogsUseCase,
    AddLogUseCase,
)
from .verified_user import (
    ListVerifiedUsersUseCase,
    AddVerifiedUserUseCase,
    RemoveVerifiedUserUseCase,
    CheckVerifiedUserUseCase,
)

__all__ = [
    "ListLogsUseCase",
    "AddLogUseCase",
    "ListVerifiedUsersUseCase",
    "AddVerifiedUserUseCase",
    "RemoveVerifiedUserUseCase",
    "CheckVerifiedUserUseCase",
]
