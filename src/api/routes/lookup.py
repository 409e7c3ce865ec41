from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.dependencies import get_app_settings, get_sources
from core.config import AppSettings
from core.domain.errors import (
    InternalFaultError,
    InvalidInputError,
    NoResultsFoundError,
    SourcesUnavailableError,
)
from core.domain.models import ApiResponse, LookupResponse
from core.interfaces.source import RecordSource
from core.services.lookup_pipeline import lookup

router = APIRouter(prefix="/api", tags=["lookup"])
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ApiResponse.fail(message).to_json())


async def _read_dni(request: Request) -> Any:
    """Devuelve `body["dni"]` o None si el body no es un objeto JSON."""

    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    return body.get("dni")


@router.post("/lookup")
async def lookup_dni(
    request: Request,
    settings: AppSettings = Depends(get_app_settings),
    sources: tuple[RecordSource, ...] = Depends(get_sources),
) -> JSONResponse:
    """Consulta todas las fuentes para un DNI y devuelve el envelope combinado."""

    dni = await _read_dni(request)
    try:
        response = await lookup(dni, settings=settings, sources=sources)
    except InvalidInputError as exc:
        return _error(400, str(exc))
    except SourcesUnavailableError as exc:
        return _error(502, str(exc))
    except NoResultsFoundError as exc:
        return _error(404, str(exc))
    except InternalFaultError as exc:
        logger.error("Lookup failed", exc_info=True, extra={"path": request.url.path})
        return _error(500, str(exc))

    return JSONResponse(status_code=200, content=ApiResponse[LookupResponse].ok(response).to_json())


@router.get("/health")
async def health(settings: AppSettings = Depends(get_app_settings)) -> dict[str, str]:
    return {"status": "ok", "engineVersion": settings.engine_version}
