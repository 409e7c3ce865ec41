"""Flujo común de las fuentes HTML.

Cada fuente concreta solo declara *qué* pedir (método, URL, campos, referer)
y *qué* extraer (selectores, tope, orden). El *cómo* vive acá una sola vez:
request -> HTML -> selectores -> normalizar -> filtrar -> dedupe -> tope -> orden.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from adapters.http_client import build_async_client, select_texts
from core.config import AppSettings
from core.domain.errors import (
    SourceEmptyError,
    SourceError,
    SourceTimeoutError,
    SourceTransportError,
)
from core.domain.models import SourceCategory, SourceResult
from core.noise_filter import NoiseFilter
from core.text_cleaning import dedupe_preserving_order, normalize_text

logger = logging.getLogger(__name__)


class HtmlRecordSource:
    """Base para fuentes que devuelven HTML (implementa `RecordSource`)."""

    name: str = ""
    category: SourceCategory | None = None

    url: str = ""
    method: str = "GET"
    referer: str | None = None
    # El DNI se repite bajo cada nombre de campo que espera el sitio.
    query_fields: tuple[str, ...] = ()
    form_fields: tuple[str, ...] = ()

    selectors: tuple[str, ...] = ()
    max_items: int | None = None
    sort_by_length: bool = False

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        noise_filter: NoiseFilter | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._noise_filter = noise_filter or NoiseFilter.from_settings(self._settings)

    def build_request_kwargs(self, dni: str) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.query_fields:
            kwargs["params"] = {field: dni for field in self.query_fields}
        if self.form_fields:
            # httpx codifica `data` como application/x-www-form-urlencoded.
            kwargs["data"] = {field: dni for field in self.form_fields}
        return kwargs

    def collect_candidates(self, html: str) -> list[str]:
        return select_texts(html=html, selectors=self.selectors)

    def extract_items(self, html: str) -> list[str]:
        cleaned = (normalize_text(raw) for raw in self.collect_candidates(html))
        items = dedupe_preserving_order([text for text in cleaned if not self._noise_filter.is_garbage(text)])
        if self.max_items is not None:
            items = items[: self.max_items]
        if self.sort_by_length:
            items = sorted(items, key=len, reverse=True)
        return items

    async def fetch_source(self, dni: str) -> SourceResult:
        try:
            html = await self._download(dni)
            items = self.extract_items(html)
            if not items:
                raise SourceEmptyError(self.name)
        except SourceError as exc:
            return self._failure(exc)

        logger.info("%s returned %d items", self.name, len(items), extra={"source": self.name})
        return SourceResult.success(source_name=self.name, category=self.category, items=items)

    async def _download(self, dni: str) -> str:
        try:
            return await asyncio.wait_for(self._send(dni), timeout=self._settings.http_timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise SourceTimeoutError(self.name) from exc

    async def _send(self, dni: str) -> str:
        headers: dict[str, str] = {}
        if self.referer:
            headers["Referer"] = self.referer

        try:
            async with build_async_client(self._settings, extra_headers=headers) as client:
                response = await client.request(self.method, self.url, **self.build_request_kwargs(dni))
        except httpx.TimeoutException as exc:
            raise SourceTimeoutError(self.name) from exc
        except httpx.HTTPError as exc:
            raise SourceTransportError(self.name) from exc

        if not response.is_success:
            raise SourceTransportError(self.name, status_code=response.status_code)
        return response.text

    def _failure(self, exc: SourceError) -> SourceResult:
        metadata = {"reason": exc.reason}
        status_code = getattr(exc, "status_code", None)
        if status_code is not None:
            metadata["status_code"] = str(status_code)

        log = logger.info if isinstance(exc, SourceEmptyError) else logger.warning
        log("%s failed: %s", self.name, exc.reason, extra={"source": self.name})
        return SourceResult.failure(
            source_name=self.name,
            category=self.category,
            message=str(exc),
            metadata=metadata,
        )
