# app/models/users.py

from pydantic import BaseModel, Field, StrictStr, ValidationError


class UserIn(BaseModel):
    name: StrictStr = Field(..., min_length=3)


class UserOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


def describe_error(error: dict) -> str:
    """
    Turn one pydantic error entry into a short message, e.g.
    '"name" length must be at least 3 characters long'.
    """
    field = ".".join(str(loc) for loc in error["loc"]) or "value"
    kind = error["type"]

    if kind == "missing":
        return f'"{field}" is required'
    if kind == "string_type":
        return f'"{field}" must be a string'
    if kind == "string_too_short":
        limit = error.get("ctx", {}).get("min_length")
        return f'"{field}" length must be at least {limit} characters long'
    if kind == "model_type":
        return "request body must be a JSON object"
    if kind == "json_invalid":
        return "request body must be valid JSON"
    return f'"{field}" {error["msg"]}'


def validation_message(exc: ValidationError) -> str:
    # Only the first failing rule is reported
    return describe_error(exc.errors()[0])
