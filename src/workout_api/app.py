"""FastAPI application factory.

Run with:
    uvicorn workout_api.app:app --reload
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from workout_api import config
from workout_api.routers import suggest, workouts
from workout_engine.exceptions import ValidationError, WorkoutEngineError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


def create_app() -> FastAPI:
    """Build the API with routers and error handlers attached."""
    app = FastAPI(title="Workout Engine API", version=config.GENERATOR_VERSION)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", "invalid request")
        else:
            message = "invalid request"
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(WorkoutEngineError)
    async def engine_error_handler(request: Request, exc: WorkoutEngineError):
        logger.error("Engine error on %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    app.include_router(suggest.router)
    app.include_router(workouts.router)

    @app.get("/api/health")
    def health():
        return {"ok": True, "generatorVersion": config.GENERATOR_VERSION}

    return app


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
app = create_app()
