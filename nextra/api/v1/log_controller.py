# Standard library imports
import logging
from typing import Any, List

# External package imports
from fastapi import APIRouter, Body, HTTPException, status

# Local application imports
from ...application.dto.log_dto import LogCreateRequest, LogResponse, LogSavedResponse
from ...application.use_cases.log.list_logs import ListLogsUseCase
from ...application.use_cases.log.add_log import AddLogUseCase
from ...core.exceptions import StorageError, ValidationError
from ...di.container import get_container
from .request_body import parse_request_body

logger = logging.getLogger(__name__)

router = APIRouter(tags=["logs"])


@router.get("", response_model=List[LogResponse])
async def list_logs() -> List[LogResponse]:
    """
    List every detection log in insertion order

    Returns:
        List of LogResponse objects
    """
    container = get_container()
    list_logs_use_case = container.get(ListLogsUseCase)

    try:
        return await list_logs_use_case.execute()
    except StorageError as exception:
        logger.error(f"Failed to read logs: {exception.message}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error reading logs"
        )


@router.post("", response_model=LogSavedResponse)
async def add_log(payload: Any = Body(None)) -> LogSavedResponse:
    """
    Record a detection log

    Args:
        payload: JSON object with the log fields; name and time are required

    Returns:
        LogSavedResponse with the stored log
    """
    container = get_container()
    add_log_use_case = container.get(AddLogUseCase)

    try:
        request = parse_request_body(LogCreateRequest, payload, "Invalid log data")
        return await add_log_use_case.execute(request)
    except ValidationError as exception:
        logger.warning(f"Rejected log: {exception.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except StorageError as exception:
        logger.error(f"Failed to save log: {exception.message}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error saving log"
        )
