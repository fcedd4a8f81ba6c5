"""
Response Envelope

Every endpoint, successful or not, answers with the same JSON shape:

    {"status": 200, "message": "success", "data": {...}}

- status: mirrors the HTTP status code
- message: "success", a confirmation, or the error text
- data: the payload, or null
"""

from typing import Any, Generic, TypeVar

from fastapi import status as http_status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

DataT = TypeVar("DataT")

SUCCESS_MESSAGE = "success"


class APIResponse(BaseModel, Generic[DataT]):
    """Uniform wrapper returned by every endpoint."""

    status: int = Field(..., description="HTTP status code", examples=[200])
    message: str = Field(..., description="Outcome message", examples=["success"])
    data: DataT | None = Field(default=None, description="Response payload")


def ok(data: Any = None) -> APIResponse:
    """200 envelope carrying a payload."""
    return APIResponse(status=http_status.HTTP_200_OK, message=SUCCESS_MESSAGE, data=data)


def ok_with_message(message: str) -> APIResponse:
    """200 envelope carrying only a confirmation message."""
    return APIResponse(status=http_status.HTTP_200_OK, message=message)


def error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Enveloped error for use in exception handlers."""
    body = APIResponse(status=status_code, message=message)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


def bad_request(message: str) -> JSONResponse:
    return error_response(http_status.HTTP_400_BAD_REQUEST, message)


def not_found(message: str) -> JSONResponse:
    return error_response(http_status.HTTP_404_NOT_FOUND, message)


def internal_server_error(message: str) -> JSONResponse:
    return error_response(http_status.HTTP_500_INTERNAL_SERVER_ERROR, message)
