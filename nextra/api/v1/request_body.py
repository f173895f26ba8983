# Standard library imports
from typing import Any, Type, TypeVar

# External package imports
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

# Local application imports
from ...core.exceptions import ValidationError

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def parse_request_body(model: Type[RequestModel], payload: Any, user_message: str) -> RequestModel:
    """
    Validate a JSON request body into a request DTO.

    A missing body is treated as an empty object, so absent fields surface
    as the use case's own validation error instead of a framework 422.

    Args:
        model: Request DTO class
        payload: Decoded JSON body, or None when the request had no body
        user_message: Message returned to the client on a malformed body

    Returns:
        Validated request DTO

    Raises:
        ValidationError: If the body is not an object or a field has the wrong type
    """
    try:
        return model.model_validate({} if payload is None else payload)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Malformed {model.__name__} body: {e.error_count()} invalid field(s)",
            user_message=user_message,
        ) from e
