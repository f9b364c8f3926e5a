"""Translation of failures into problem-details JSON responses."""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"
VALIDATION_TITLE = "One or more validation errors occurred."
UNEXPECTED_DETAIL = "An unexpected error occurred. Please try again later."


class RequestValidationFailed(Exception):
    """Raised by routes when a payload breaks one or more field rules."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__("request validation failed")
        self.errors = errors


def problem_response(request: Request, status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        media_type=PROBLEM_JSON,
        content={
            "status": status_code,
            "title": HTTPStatus(status_code).phrase,
            "detail": detail,
            "instance": request.url.path,
        },
    )


def validation_response(request: Request, errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        media_type=PROBLEM_JSON,
        content={
            "status": status.HTTP_400_BAD_REQUEST,
            "title": VALIDATION_TITLE,
            "errors": errors,
            "instance": request.url.path,
        },
    )


def _field_name(loc: tuple) -> str:
    # ("body", "firstName") -> "firstName"; ("query", "page") -> "page"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = problem_response(request, exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(tuple(error.get("loc", ()))), []).append(error.get("msg", "invalid value"))
    logger.info("rejected malformed request to %s: %s", request.url.path, errors)
    return validation_response(request, errors)


async def _handle_validation_failed(request: Request, exc: RequestValidationFailed) -> JSONResponse:
    logger.info("validation failed for %s: %s", request.url.path, exc.errors)
    return validation_response(request, exc.errors)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error while serving %s %s", request.method, request.url.path)
    return problem_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_DETAIL)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(RequestValidationFailed, _handle_validation_failed)
    app.add_exception_handler(Exception, _handle_unexpected)
