"""
Error translator.

Registers exception handlers that render every expected failure as
``{"erros": [message, ...]}``:

* request validation failures → 400, one message per invalid field;
* ``BusinessError`` → 400 with the rule's message;
* ``IllegalArgumentError`` → 400 with its message;
* ``HTTPException`` raised by a router (or by routing itself, e.g.
  unknown paths) → its own status code and detail.

Any other exception is left to the server and surfaces as a 500.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from library_api.app.core.exceptions import BusinessError, IllegalArgumentError
from library_api.app.schemas.errors import ApiErrors

logger = logging.getLogger(__name__)


def _errors_response(status_code: int, *messages: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiErrors(erros=list(messages)).model_dump(),
        headers=headers,
    )


def validation_message(error: Dict[str, Any]) -> str:
    """Render one pydantic error entry as a single message.

    Messages raised by our own validators are used as they are;
    built-in errors are prefixed with the offending field name.
    """
    if error.get("type") == "value_error":
        cause = error.get("ctx", {}).get("error")
        if cause is not None:
            return str(cause)
    loc = [str(part) for part in error.get("loc", ())]
    field = ".".join(loc[1:]) if len(loc) > 1 else "".join(loc)
    return f"{field}: {error.get('msg')}" if field else str(error.get("msg"))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [validation_message(error) for error in exc.errors()]
    logger.debug("Validation failed on %s %s: %s", request.method, request.url.path, messages)
    return _errors_response(status.HTTP_400_BAD_REQUEST, *messages)


async def handle_business_error(request: Request, exc: BusinessError) -> JSONResponse:
    logger.debug("Business rule violated on %s %s: %s", request.method, request.url.path, exc.message)
    return _errors_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_illegal_argument(request: Request, exc: IllegalArgumentError) -> JSONResponse:
    logger.debug("Illegal argument on %s %s: %s", request.method, request.url.path, exc)
    return _errors_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.debug("HTTP %s on %s %s: %s", exc.status_code, request.method, request.url.path, exc.detail)
    return _errors_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(BusinessError, handle_business_error)
    app.add_exception_handler(IllegalArgumentError, handle_illegal_argument)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
