"""FastAPI application factory for the task board backend."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from taskboard import __version__
from taskboard.api.v1 import api_router
from taskboard.config import Settings, settings
from taskboard.database import Base, engine
from taskboard.errors import PersistenceError, TaskBoardError
import taskboard.models  # noqa: F401  (registers the tables on Base.metadata)

logger = logging.getLogger(__name__)


def _configure_logging(config: Settings) -> None:
    """Configure application logging."""

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        force=True,
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables initialized")
    yield


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(config: Settings = settings) -> FastAPI:
    """Build and configure the FastAPI application."""

    _configure_logging(config)

    app = FastAPI(title=config.APP_NAME, version=__version__, debug=config.DEBUG, lifespan=lifespan)

    request_logger = logging.getLogger("taskboard.http")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        response = None
        try:
            response = await call_next(request)
        except Exception:
            request_logger.exception("request_failed method=%s path=%s", request.method, request.url.path)
            raise
        finally:
            duration_ms = int((time.time() - start) * 1000)
            request_logger.info(
                "request method=%s path=%s status=%s duration_ms=%s",
                request.method,
                request.url.path,
                getattr(response, "status_code", "ERR"),
                duration_ms,
            )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
    )

    @app.exception_handler(TaskBoardError)
    async def handle_domain_error(request: Request, exc: TaskBoardError) -> JSONResponse:
        if isinstance(exc, PersistenceError) or exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request format")

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("%s %s database failure", request.method, request.url.path, exc_info=exc)
        return _error_response(PersistenceError.status_code, PersistenceError.default_message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error("%s %s unhandled error", request.method, request.url.path, exc_info=exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, TaskBoardError.default_message)

    @app.get("/health", tags=["health"], summary="Health check")
    def health() -> dict[str, str]:
        """Return a simple status payload for readiness checks."""

        return {"status": "ok", "version": __version__}

    app.include_router(api_router)

    return app


# ASGI entrypoint for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("taskboard.main:app", host=settings.HOST, port=settings.PORT)
