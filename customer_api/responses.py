"""Response codes and envelope construction shared by every endpoint."""
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from customer_api.schemas.envelope import Envelope, FieldError


@dataclass(frozen=True)
class ResponseCode:
    code: str
    message: str
    result: bool = True


DEFAULT_200 = ResponseCode("default_200", "Successfully loaded")
DEFAULT_400 = ResponseCode("default_400", "Invalid or missing information", result=False)
DEFAULT_404 = ResponseCode("default_404", "Resource not found", result=False)
DEFAULT_500 = ResponseCode("default_500", "Internal server error", result=False)
ZONE_404 = ResponseCode("zone_404", "Zone not found", result=False)

# HTTP status to envelope code for errors raised as HTTPException
STATUS_CODES = {
    400: DEFAULT_400,
    404: DEFAULT_404,
    500: DEFAULT_500,
}


def format_response(
    code: ResponseCode,
    data: Any = None,
    errors: Optional[Sequence[FieldError]] = None,
    message: Optional[str] = None,
) -> dict:
    """Build the envelope body for ``code``."""
    envelope = Envelope(
        result=code.result,
        response_code=code.code,
        message=message or code.message,
        data=jsonable_encoder(data),
        errors=list(errors or []),
    )
    return envelope.model_dump(mode="json")


def envelope_response(
    code: ResponseCode,
    data: Any = None,
    errors: Optional[Sequence[FieldError]] = None,
    status_code: int = 200,
    message: Optional[str] = None,
) -> JSONResponse:
    """Wrap ``data`` in the envelope and return it as a JSON response."""
    return JSONResponse(
        status_code=status_code,
        content=format_response(code, data, errors, message),
    )


def required_field_errors(fields: Iterable[str]) -> List[FieldError]:
    """Field errors for required fields that were not supplied."""
    return [
        FieldError(error_code=field, message=f"The {field} field is required.")
        for field in fields
    ]


def validation_errors(errors: Iterable[dict]) -> List[FieldError]:
    """
    Convert pydantic/FastAPI validation errors to envelope field errors.

    Missing and empty values are reported the same way; anything else keeps
    the validator's own message.
    """
    field_errors: List[FieldError] = []
    seen = set()
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("query", "body", "path")]
        field = ".".join(loc) or "request"
        if field in seen:
            continue
        seen.add(field)
        if error.get("type") in ("missing", "string_too_short"):
            field_errors.extend(required_field_errors([field]))
        else:
            field_errors.append(FieldError(error_code=field, message=error.get("msg", "Invalid value")))
    return field_errors
