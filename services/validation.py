from typing import Any

from fastapi.exceptions import RequestValidationError

from core.errors import ValidationError
from models import TextBody

TEXT_REQUIRED = "Text is required"

# Errors about the body as a whole, reported against the text field
WHOLE_BODY_ERRORS = {"missing", "json_invalid", "model_attributes_type", "dict_type"}


def field_error(param: str, msg: str, value: Any = None, location: str = "body") -> dict[str, Any]:
    return {"value": value, "msg": msg, "param": param, "location": location}


def check_text(body: TextBody) -> list[dict[str, Any]]:
    """Return field errors for a body whose text is missing or empty"""
    if body.text is None or body.text == "":
        return [field_error("text", TEXT_REQUIRED, body.text)]
    return []


def errors_from_request_validation(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten FastAPI's body parsing errors into the same field error shape"""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        location = loc[0] if loc else "body"
        if location == "body" and (len(loc) == 1 or error.get("type") in WHOLE_BODY_ERRORS):
            errors.append(field_error("text", TEXT_REQUIRED, None, location))
            continue
        param = ".".join(loc[1:]) or location
        msg = TEXT_REQUIRED if param == "text" else error.get("msg", "Invalid value")
        errors.append(field_error(param, msg, error.get("input"), location))
    return errors


async def require_text(body: TextBody) -> TextBody:
    errors = check_text(body)
    if errors:
        raise ValidationError(errors)
    return body
