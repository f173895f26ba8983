# Standard library imports
import logging
from typing import Any, List, Optional

# External package imports
from fastapi import APIRouter, Body, File, Form, HTTPException, UploadFile, status

# Local application imports
from ...application.dto.verified_user_dto import (
    CheckUserRequest,
    CheckUserResponse,
    VerifiedUserRemovedResponse,
    VerifiedUserResponse,
    VerifiedUserSavedResponse,
)
from ...application.use_cases.verified_user.list_users import ListVerifiedUsersUseCase
from ...application.use_cases.verified_user.add_user import AddVerifiedUserUseCase
from ...application.use_cases.verified_user.remove_user import RemoveVerifiedUserUseCase
from ...application.use_cases.verified_user.check_user import CheckVerifiedUserUseCase
from ...core.exceptions import StorageError, UploadTooLargeError, ValidationError
from ...di.container import get_container
from .request_body import parse_request_body

logger = logging.getLogger(__name__)

router = APIRouter(tags=["verified-users"])


@router.get("/users", response_model=List[VerifiedUserResponse])
async def list_users() -> List[VerifiedUserResponse]:
    """
    List every verified user

    Returns:
        List of VerifiedUserResponse objects
    """
    container = get_container()
    list_users_use_case = container.get(ListVerifiedUsersUseCase)

    try:
        return await list_users_use_case.execute()
    except StorageError as exception:
        logger.error(f"Failed to read users: {exception.message}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error reading users"
        )


@router.post("/users", response_model=VerifiedUserSavedResponse)
async def add_user(
    name: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
) -> VerifiedUserSavedResponse:
    """
    Register a verified user (multipart form with a photo file)

    Args:
        name: User name
        role: User role
        photo: Photo file, stored under /uploads

    Returns:
        VerifiedUserSavedResponse with the stored user
    """
    container = get_container()
    add_user_use_case = container.get(AddVerifiedUserUseCase)

    try:
        return await add_user_use_case.execute(name=name, role=role, photo=photo)
    except ValidationError as exception:
        logger.warning(f"Rejected user: {exception.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except UploadTooLargeError as exception:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=exception.user_message
        )
    except StorageError as exception:
        logger.error(f"Failed to save user: {exception.message}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error saving user"
        )


@router.delete("/users/{name:path}", response_model=VerifiedUserRemovedResponse)
async def remove_user(name: str) -> VerifiedUserRemovedResponse:
    """
    Remove every verified user with this name (case-insensitive)

    Removing a name that is not registered still succeeds.

    Args:
        name: URL-encoded user name

    Returns:
        VerifiedUserRemovedResponse with a confirmation message
    """
    container = get_container()
    remove_user_use_case = container.get(RemoveVerifiedUserUseCase)

    try:
        return await remove_user_use_case.execute(name)
    except StorageError as exception:
        logger.error(f"Failed to delete user {name!r}: {exception.message}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting user"
        )


@router.post("/checkUser", response_model=CheckUserResponse)
async def check_user(payload: Any = Body(None)) -> CheckUserResponse:
    """
    Check whether a name belongs to a verified user

    Args:
        payload: JSON object with the name to check

    Returns:
        CheckUserResponse with verified flag and matching user
    """
    container = get_container()
    check_user_use_case = container.get(CheckVerifiedUserUseCase)

    try:
        request = parse_request_body(CheckUserRequest, payload, "Name required")
        return await check_user_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except StorageError as exception:
        logger.error(f"Failed to read users: {exception.message}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error reading users"
        )
