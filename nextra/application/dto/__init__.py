from .log_dto import LogCreateRequest, LogResponse, LogSavedResponse
from .verified_user_dto import (
    VerifiedUserResponse,
    VerifiedUserSavedResponse,
    VerifiedUserRemovedResponse,
    CheckUserRequest,
    CheckUserResponse,
)

__all__ = [
    "LogCreateRequest",
    "LogResponse",
    "LogSavedResponse",
    "VerifiedUserResponse",
    "VerifiedUserSavedResponse",
    "VerifiedUserRemovedResponse",
    "CheckUserRequest",
    "CheckUserResponse",
]
