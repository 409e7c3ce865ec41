from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from adapters.record_sources import default_sources
from core.config import AppSettings, get_settings
from core.interfaces.source import RecordSource
from core.noise_filter import NoiseFilter
from core.resources_loader import load_noise_terms


def get_app_settings() -> AppSettings:
    return get_settings()


@lru_cache(maxsize=8)
def _noise_filter_for(path: Path | None) -> NoiseFilter:
    return NoiseFilter(load_noise_terms(path))


def get_sources(settings: AppSettings = Depends(get_app_settings)) -> tuple[RecordSource, ...]:
    # Fuentes nuevas por request, construidas con los settings inyectados;
    # solo el filtro (inmutable) se reutiliza entre requests.
    noise_filter = _noise_filter_for(settings.noise_terms_path)
    return tuple(default_sources(settings, noise_filter=noise_filter))
