from typing import Any

from pydantic import BaseModel


class MessageResponse(BaseModel):
    msg: str


class FieldError(BaseModel):
    value: Any = None
    msg: str
    param: str
    location: str = "body"


class ValidationErrorResponse(BaseModel):
    errors: list[FieldError]
