"""
Custom exceptions and error handlers for consistent error responses.

Every error body carries an ``error`` message plus a stable ``error_code``.
"""

import logging

from fastapi import Request, status
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from typing import Any, Dict

logger = logging.getLogger("tourplanner.errors")


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(AppException):
    """Raised when a request body breaks a field rule (digits in location, blank name...)."""

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message=message,
            error_code="ERR_VALIDATION",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"field": field} if field else None
        )


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "id": resource_id}
        )


class DriverNotFoundError(AppException):
    """Raised when a tour references a driver that does not exist."""

    def __init__(self, driver_id: int):
        super().__init__(
            message="Driver not found",
            error_code="ERR_DRIVER_NOT_FOUND",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"driver_id": driver_id}
        )


class LocationMismatchError(AppException):
    """Raised when a driver's location differs from the tour's starting location."""

    def __init__(self, driver_id: int, driver_location: str, location_from: str):
        super().__init__(
            message="Driver location must match the tour's starting location",
            error_code="ERR_LOCATION_MISMATCH",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={
                "driver_id": driver_id,
                "driver_location": driver_location,
                "location_from": location_from
            }
        )


# Global Exception Handlers

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler for custom application exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "error_code": exc.error_code,
            "details": exc.details
        }
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for FastAPI HTTPException with standardized format."""
    # Map status code to error code
    error_code_map = {
        400: "ERR_BAD_REQUEST",
        404: "ERR_NOT_FOUND",
        405: "ERR_METHOD_NOT_ALLOWED",
        500: "ERR_INTERNAL_SERVER"
    }

    error_code = error_code_map.get(exc.status_code, "ERR_UNKNOWN")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "error_code": error_code,
            "details": {}
        },
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handler for Pydantic validation errors (malformed body or path)."""
    errors = exc.errors()
    message = "Validation error"
    if errors:
        first = errors[0]
        loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{loc}: {first.get('msg')}" if loc else first.get("msg", message)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": message,
            "error_code": "ERR_VALIDATION",
            "details": {
                "errors": jsonable_encoder(
                    [{"loc": e.get("loc"), "msg": e.get("msg"), "type": e.get("type")} for e in errors]
                )
            }
        }
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.exception(
        "Unhandled exception on %s %s", request.method, request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "An internal server error occurred",
            "error_code": "ERR_INTERNAL_SERVER",
            "details": {}
        }
    )
