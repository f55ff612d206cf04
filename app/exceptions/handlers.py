import logging

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .custom import ConfigurationError, MissingFieldsError, OpenRouterError

logger = logging.getLogger(__name__)


async def configuration_error_handler(
    _request: Request, exc: ConfigurationError
) -> JSONResponse:
    logger.error("Configuration error: %s", exc.message)
    return JSONResponse(status_code=500, content={"error": exc.message})


async def missing_fields_error_handler(
    _request: Request, exc: MissingFieldsError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": exc.message,
            "required": exc.required,
            "missing": exc.missing,
        },
    )


async def openrouter_error_handler(
    _request: Request, exc: OpenRouterError
) -> JSONResponse:
    logger.error("OpenRouter error: %s (status=%s)", exc.message, exc.status_code)
    content: dict = {"error": exc.message}
    if exc.status_code is not None:
        content["status"] = exc.status_code
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=502, content=content)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Methods the router does not list (TRACE, CONNECT, ...) end up here.
    if exc.status_code == 405:
        return JSONResponse(
            status_code=405,
            content={"error": "Method not allowed"},
            headers={"Allow": "POST"},
        )
    return await http_exception_handler(request, exc)
