"""Fuentes de registros públicos (adaptadores concretos).

Por qué un paquete:
- Agrupa un módulo por sitio externo.
- Cada módulo implementa `core.interfaces.source.RecordSource`.

El orden de `SOURCE_CLASSES` es el orden de registro: define el orden de
`sources` en la respuesta, independientemente de qué fuente responda primero.
"""

from __future__ import annotations

from adapters.record_sources.base import HtmlRecordSource
from adapters.record_sources.cuitonline import CuitOnlineSource
from adapters.record_sources.datuar import DatuarSource
from adapters.record_sources.dateas import DateasSource
from core.config import AppSettings
from core.noise_filter import NoiseFilter

SOURCE_CLASSES: tuple[type[HtmlRecordSource], ...] = (
    DatuarSource,
    CuitOnlineSource,
    DateasSource,
)


def default_sources(
    settings: AppSettings | None = None,
    *,
    noise_filter: NoiseFilter | None = None,
) -> list[HtmlRecordSource]:
    """Instancia las fuentes registradas (comparten un único filtro inmutable)."""

    settings = settings or AppSettings()
    noise_filter = noise_filter or NoiseFilter.from_settings(settings)
    return [source_cls(settings, noise_filter=noise_filter) for source_cls in SOURCE_CLASSES]


__all__ = [
    "CuitOnlineSource",
    "DateasSource",
    "DatuarSource",
    "HtmlRecordSource",
    "SOURCE_CLASSES",
    "default_sources",
]
