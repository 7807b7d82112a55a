"""
Central mapping from raised errors to HTTP responses.

Not-found conditions answer 404; every other failure, known or not,
answers 403 with a readable ``detail``.
"""
import logging
import re
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.exceptions import AppException

logger = logging.getLogger(__name__)

GENERIC_CONSTRAINT_ERROR = "Request violates a data constraint."
GENERIC_STORE_ERROR = "Request could not be completed by the data store."
GENERIC_ERROR = "Request could not be processed."

# PostgreSQL: Key (username)=(alice) already exists.
PG_DUPLICATE_RE = re.compile(r"Key \((?P<field>[^)]+)\)=\((?P<value>.*?)\) already exists")
# SQLite: UNIQUE constraint failed: users.username
SQLITE_DUPLICATE_RE = re.compile(r"UNIQUE constraint failed: (?P<columns>[\w., ]+)")


def describe_integrity_error(exc: IntegrityError) -> str:
    """Name the offending field of a uniqueness violation when the driver says which one"""
    text = str(exc.orig) if exc.orig is not None else str(exc)

    match = PG_DUPLICATE_RE.search(text)
    if match:
        return f"{match.group('field')}: {match.group('value')} already exists."

    match = SQLITE_DUPLICATE_RE.search(text)
    if match:
        fields = ", ".join(
            column.strip().split(".")[-1] for column in match.group("columns").split(",")
        )
        return f"{fields}: value already exists."

    return GENERIC_CONSTRAINT_ERROR


def describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return GENERIC_ERROR
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    field: Optional[str] = loc[-1] if loc else None
    message = first.get("msg", "invalid value")
    return f"{field}: {message}" if field else message


def _forbidden(detail: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": detail})


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    detail = describe_integrity_error(exc)
    logger.warning("%s %s -> constraint violation: %s", request.method, request.url.path, detail)
    return _forbidden(detail)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = describe_validation_error(exc)
    logger.warning("%s %s -> invalid request: %s", request.method, request.url.path, detail)
    return _forbidden(detail)


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("%s %s -> store error: %s", request.method, request.url.path, exc)
    return _forbidden(GENERIC_STORE_ERROR)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _forbidden(GENERIC_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
