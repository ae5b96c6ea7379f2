from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from aaa_audit.api.deps import Services
from aaa_audit.api.routes import ROUTERS
from aaa_audit.app.errors import (
    AppError,
    FileTooLargeError,
    InvalidRequestError,
    NotFoundError,
    ServiceUnavailableError,
)
from aaa_audit.core.clock import utc_now_iso

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(FileTooLargeError)
    async def _too_large(request: Request, exc: FileTooLargeError):
        return JSONResponse(status_code=400, content={"error": "File too large", "message": str(exc)})

    @app.exception_handler(InvalidRequestError)
    async def _invalid(request: Request, exc: InvalidRequestError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(ServiceUnavailableError)
    async def _unavailable(request: Request, exc: ServiceUnavailableError):
        return JSONResponse(status_code=503, content={"error": str(exc)})

    @app.exception_handler(AppError)
    async def _app_error(request: Request, exc: AppError):
        logger.error("Request failed", extra={"ctx": {"path": request.url.path, "error": str(exc)}})
        return JSONResponse(status_code=500, content={"error": "Internal Server Error", "message": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def _validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"ctx": {"path": request.url.path}})
        return JSONResponse(status_code=500, content={"error": "Internal Server Error", "message": str(exc)})


def create_app(services: Services) -> FastAPI:
    app = FastAPI(title="WCAG 2.1 AAA Accessibility Audit", version="0.1.0")
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=services.settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        t0 = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s",
            request.method,
            request.url.path,
            extra={
                "ctx": {
                    "status": response.status_code,
                    "duration_ms": int((time.perf_counter() - t0) * 1000),
                }
            },
        )
        return response

    _register_error_handlers(app)

    @app.get("/api/health")
    def health():
        return {"status": "ok", "timestamp": utc_now_iso()}

    for router in ROUTERS:
        app.include_router(router)

    app.mount("/uploads", StaticFiles(directory=services.uploads.root), name="uploads")
    return app
