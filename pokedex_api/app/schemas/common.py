"""Response envelope shared by every endpoint."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")

DEFAULT_SUCCESS_MESSAGE = "Request was successful"


class ApiResponse(BaseModel, Generic[DataT]):
    """``{success, message, data}`` wrapper around a payload."""

    success: bool = True
    message: str = DEFAULT_SUCCESS_MESSAGE
    data: Optional[DataT] = None


def ok(data: Optional[DataT] = None, message: str = DEFAULT_SUCCESS_MESSAGE) -> ApiResponse[DataT]:
    """Wrap ``data`` in a successful envelope."""
    return ApiResponse(success=True, message=message, data=data)
