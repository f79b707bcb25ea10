# components_api/core/errors.py
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# driver messages can carry row data; they only go to the log
DATA_ACCESS_DETAIL = "The data store could not complete the request"


class ValidationError(ValueError):
    """Raised when a required component field is missing or empty."""

    def __init__(self, message: str, fields: List[str] = None):
        super().__init__(message)
        self.message = message
        self.fields = fields or []


class DataAccessError(RuntimeError):
    """Raised when the underlying store fails (connectivity, constraints, ...)."""


def _describe_validation_errors(errors: List[Dict[str, Any]]) -> List[str]:
    out = []
    for err in errors:
        # loc looks like ("body", "name") or ("path", "component_id")
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        field = ".".join(loc) or "body"
        out.append(f"{field}: {err.get('msg')}")
    return out


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as a JSON object with an `error` key."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request",
                "fields": _describe_validation_errors(exc.errors()),
            },
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.message, "fields": exc.fields},
        )

    @app.exception_handler(DataAccessError)
    async def data_access_error_handler(request: Request, exc: DataAccessError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Database error", "detail": DATA_ACCESS_DETAIL},
        )
