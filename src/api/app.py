"""FastAPI application for the lookup endpoint."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes.lookup import router as lookup_router
from core.config import get_settings
from core.domain.errors import InternalFaultError
from core.domain.models import ApiResponse
from core.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    settings = get_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    application = FastAPI(
        title="OSINT-DNI",
        version=settings.engine_version,
    )

    allowed_origins = {"http://localhost:5173", "http://127.0.0.1:5173"}
    allowed_origins.update(str(origin).rstrip("/") for origin in settings.cors_origins)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(allowed_origins),
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.include_router(lookup_router)

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logging.error("Unhandled exception at %s", request.url.path, exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ApiResponse.fail(str(InternalFaultError())).to_json(),
        )

    return application


app = create_app()
