from typing import Any

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    code: str = Field(examples=["NOT_FOUND"])
    message: str = Field(examples=["Project not found"])
    details: dict[str, Any] = Field(default_factory=dict)
    request_id: str


class ErrorResponse(BaseModel):
    """Envelope for every non-2xx response.

    Validation failures list each offending field under
    ``details["errors"]`` as ``{"field": ..., "message": ...}``.
    """

    error: ErrorBody


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    404: {"model": ErrorResponse, "description": "Project not found"},
    500: {"model": ErrorResponse, "description": "Internal or configuration error"},
}
