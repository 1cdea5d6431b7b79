"""Uniform response envelope schemas."""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    """A single request field that failed validation."""
    error_code: str = Field(..., description="Name of the offending field")
    message: str = Field(..., description="Human-readable error message")


class Envelope(BaseModel):
    """Wrapper applied to every response of the customer API."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "result": True,
                "response_code": "default_200",
                "message": "Successfully loaded",
                "data": {},
                "errors": []
            }
        }
    )

    result: bool = Field(..., description="Whether the request produced the requested resource")
    response_code: str = Field(..., description="Machine-readable response code")
    message: str = Field(..., description="Human-readable message")
    data: Optional[Any] = Field(None, description="Response payload")
    errors: List[FieldError] = Field(default_factory=list)
