from __future__ import annotations

import asyncio

import pytest

from core.config import AppSettings
from core.domain.models import SourceCategory, SourceResult
from core.noise_filter import NoiseFilter


class FakeSource:
    """In-memory `RecordSource` that records calls and completion order."""

    def __init__(
        self,
        name: str,
        *,
        items: list[str] | None = None,
        message: str | None = None,
        reason: str = "empty",
        delay: float = 0.0,
        exc: Exception | None = None,
        completed: list[str] | None = None,
    ) -> None:
        self.name = name
        self.category = SourceCategory.OTROS
        self.items = items or []
        self.message = message or f"No se encontraron registros en {name}."
        self.reason = reason
        self.delay = delay
        self.exc = exc
        self.completed = completed if completed is not None else []
        self.calls: list[str] = []

    async def fetch_source(self, dni: str) -> SourceResult:
        self.calls.append(dni)
        if self.delay:
            await asyncio.sleep(self.delay)
        self.completed.append(self.name)
        if self.exc is not None:
            raise self.exc
        if self.items:
            return SourceResult.success(source_name=self.name, category=self.category, items=self.items)
        return SourceResult.failure(
            source_name=self.name,
            category=self.category,
            message=self.message,
            metadata={"reason": self.reason},
        )


@pytest.fixture
def fake_source():
    return FakeSource


@pytest.fixture
def settings():
    return AppSettings(http_timeout_seconds=0.5, engine_version="osint-dni/test")


@pytest.fixture
def noise_filter():
    return NoiseFilter(["publicidad", "cookies", "todos los derechos reservados", "datuar"])


def datuar_html(*texts: str) -> str:
    spans = "\n".join(f'<p class="f_gotham_book text-dark small">{t}</p>' for t in texts)
    return f"<html><body><div class='resultado'>{spans}</div><footer>© Datuar</footer></body></html>"


@pytest.fixture
def make_datuar_html():
    return datuar_html
