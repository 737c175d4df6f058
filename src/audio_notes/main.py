"""FastAPI application entry point."""

from ddtrace import patch
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from audio_notes.logging import setup_logging
from audio_notes.response_models import ErrorResponse
from audio_notes.routes import process_audio_router

logger = setup_logging(__name__)

patch(fastapi=True)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

METHOD_NOT_ALLOWED = "Method not allowed. Only POST requests are accepted."


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Renders HTTP errors as the JSON error envelope."""
    if exc.status_code == 405:
        return _error_response(405, METHOD_NOT_ALLOWED, exc.headers)
    return _error_response(exc.status_code, str(exc.detail), exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Treats malformed form input as a missing audio file."""
    logger.warning("Invalid request body", extra={"errors": str(exc.errors())})
    return _error_response(400, "No audio file provided")


async def envelope_middleware(request: Request, call_next) -> Response:
    """Adds CORS headers and turns escaped exceptions into one 500 envelope."""
    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            "Unhandled error", extra={"path": request.url.path, "method": request.method}
        )
        response = _error_response(500, "Internal server error")

    response.headers.update(CORS_HEADERS)
    return response


def create_app() -> FastAPI:
    """Builds the FastAPI application."""
    app = FastAPI(title="Audio Notes Service")
    app.include_router(process_audio_router)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.middleware("http")(envelope_middleware)

    @app.get("/health", include_in_schema=False)
    def health():
        return {"status": "ok"}

    return app


app = create_app()
