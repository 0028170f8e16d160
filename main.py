#!/usr/bin/env python3
"""
Main entrypoint for the Bunkmeter attendance API.

Settings come from the environment (or a .env file):
 - HOST / PORT: where uvicorn binds (defaults to 0.0.0.0:8000)
 - LOG_LEVEL: application log level (defaults to INFO)
 - DEBUG: enable auto-reload (defaults to false)

Examples:
    export PORT=10000
    uv run main.py
"""
import uuid

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bunkmeter import __version__
from bunkmeter.api import APIResponse, router
from bunkmeter.core import settings
from bunkmeter.engine.stream import app_logger, request_logging_context

REQUEST_ID_HEADER = "X-Request-ID"

app_logger.setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(
    title="Bunkmeter",
    description="Attendance percentage and how many classes you can skip or must attend",
    version=__version__,
)


@app.middleware("http")
async def attach_request_id(request: Request, call_next):
    # Reuse the caller's id when given
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

    async with request_logging_context(request_id):
        app_logger.debug(f"{request.method} {request.url.path}")
        response = await call_next(request)

    response.headers[REQUEST_ID_HEADER] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    app_logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
    response_payload, status_code = APIResponse.error(
        error_type="RequestValidationError",
        details=jsonable_errors(exc),
        code="malformed_request",
        status_code=422,
    )
    return JSONResponse(content=response_payload, status_code=status_code)


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


app.include_router(router, prefix="/api")


if __name__ == "__main__":
    print(f"Starting API server on port {settings.PORT}...")
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
