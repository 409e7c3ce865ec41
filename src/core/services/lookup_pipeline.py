"""Lookup orchestration.

This module owns the whole request flow that sits between the entry-points
(HTTP endpoint, CLI) and the source adapters: validate the identifier, fan
out to every registered source concurrently, and fold the per-source results
into one `LookupResponse`. Entry-points only translate the raised errors into
their own surface (status codes, exit codes).
"""

from __future__ import annotations

import asyncio
import logging
import re
import uuid
from datetime import datetime, timezone
from typing import Any, Sequence

from adapters.record_sources import default_sources
from core.config import AppSettings
from core.domain.errors import (
    InternalFaultError,
    InvalidInputError,
    NoResultsFoundError,
    SourcesUnavailableError,
    SourceTimeoutError,
    SourceTransportError,
)
from core.domain.models import LookupResponse, SourceResult
from core.interfaces.source import RecordSource

logger = logging.getLogger(__name__)

_DNI_PATTERN = re.compile(r"[0-9]+")
_TRANSPORT_REASONS = frozenset({SourceTimeoutError.reason, SourceTransportError.reason})


def validate_dni(value: Any) -> str:
    """Return the identifier unchanged if it is a non-empty string of ASCII digits."""

    if not isinstance(value, str) or not _DNI_PATTERN.fullmatch(value):
        raise InvalidInputError()
    return value


async def fetch_all(sources: Sequence[RecordSource], dni: str) -> list[SourceResult]:
    """Run every source concurrently and collect results by registration index.

    Siblings are never cancelled: every source runs to completion (or to its
    own deadline) before an unexpected exception from any of them is raised.
    """

    outcomes = await asyncio.gather(
        *(source.fetch_source(dni) for source in sources),
        return_exceptions=True,
    )

    results: list[SourceResult] = []
    for source, outcome in zip(sources, outcomes):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            logger.error(
                "Source %s raised an unexpected error",
                source.name,
                exc_info=outcome,
                extra={"source": source.name},
            )
            raise InternalFaultError() from outcome
        results.append(outcome)
    return results


def _all_unavailable(results: Sequence[SourceResult]) -> bool:
    return bool(results) and all(r.metadata.get("reason") in _TRANSPORT_REASONS for r in results)


async def lookup(
    dni: Any,
    *,
    settings: AppSettings | None = None,
    sources: Sequence[RecordSource] | None = None,
) -> LookupResponse:
    settings = settings or AppSettings()
    dni = validate_dni(dni)
    if sources is None:
        sources = default_sources(settings)

    results = await fetch_all(sources, dni)
    succeeded = sum(1 for r in results if r.ok)
    logger.info("Lookup finished: %d/%d sources with data", succeeded, len(results))

    if not succeeded:
        if _all_unavailable(results):
            raise SourcesUnavailableError()
        raise NoResultsFoundError()

    return LookupResponse(
        sources=results,
        search_id=str(uuid.uuid4()),
        timestamp=datetime.now(timezone.utc),
        engine_version=settings.engine_version,
    )
