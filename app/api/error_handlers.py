# app/api/error_handlers.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.models.users import describe_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Requests FastAPI itself rejects (bad path params, bad JSON) become 400s."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = dict(errors[0]) if errors else {"loc": (), "type": "", "msg": "Invalid request"}
        # drop the "path" / "query" / "body" prefix
        first["loc"] = tuple(first.get("loc", ()))[1:]
        message = describe_error(first)

        logger.warning("Validation error on %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": message},
        )
