"""
Error taxonomy shared by schemas, services and the HTTP layer.

Services raise these exceptions and never build HTTP responses
themselves.  ``register_error_handlers`` turns each of them into a
tagged JSON body of the form::

    {"error": {"code": "NOT_FOUND", "message": "...", "fields": [...]}}

so callers can branch on ``code`` instead of parsing messages.
FastAPI's own request validation failures are rendered in the same
shape.
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class PortfolioError(Exception):
    """Base class for all errors surfaced to API callers."""

    code = "ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class ValidationError(PortfolioError):
    """Input failed schema constraints.  Raised before any store access."""

    code = "VALIDATION_ERROR"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, message: str, fields: Optional[List[Dict[str, str]]] = None) -> None:
        super().__init__(message)
        self.fields = fields or []

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["fields"] = self.fields
        return payload


class NotFoundError(PortfolioError):
    """The targeted record does not exist."""

    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(PortfolioError):
    """A unique constraint was violated."""

    code = "CONFLICT"
    status_code = status.HTTP_409_CONFLICT


class StoreError(PortfolioError):
    """Any other failure of the underlying database."""

    code = "STORE_ERROR"


def format_field_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dictionaries into ``{"field", "message"}`` pairs.

    The ``body``/``query`` prefix FastAPI adds to locations is dropped so
    the same field path is reported regardless of where validation ran.
    """
    fields = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
        fields.append({"field": ".".join(loc) or "__root__", "message": error.get("msg", "invalid value")})
    return fields


async def _portfolio_error_handler(request: Request, exc: PortfolioError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError("Invalid input", format_field_errors(exc.errors()))
    return JSONResponse(status_code=error.status_code, content={"error": error.to_dict()})


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on ``app``."""
    app.add_exception_handler(PortfolioError, _portfolio_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
