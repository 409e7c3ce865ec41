"""Clasificación de ruido (chrome de plantilla vs. fragmento de registro).

Por qué centralizado:
- Es el único punto heurístico del sistema; todos los adaptadores aplican
  exactamente las mismas reglas.
- Los términos son datos (JSON), no constantes: cambian cuando cambia el
  markup de los sitios.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.config import AppSettings
from core.resources_loader import load_noise_terms

MIN_LENGTH = 3
MIN_NUMERIC_LENGTH = 5

_NUMERIC_ONLY = re.compile(r"[\d\W_]+")


class NoiseFilter:
    """Decide si un texto ya normalizado es basura.

    Reglas (cualquiera alcanza):
    - contiene un término de ruido (case-insensitive)
    - largo menor a `MIN_LENGTH`
    - solo dígitos/puntuación/espacios y largo menor a `MIN_NUMERIC_LENGTH`
    """

    def __init__(self, terms: Iterable[str]) -> None:
        self._terms = tuple(t.lower() for t in terms if t)

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "NoiseFilter":
        settings = settings or AppSettings()
        return cls(load_noise_terms(settings.noise_terms_path))

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    def is_garbage(self, text: str) -> bool:
        if len(text) < MIN_LENGTH:
            return True
        if len(text) < MIN_NUMERIC_LENGTH and _NUMERIC_ONLY.fullmatch(text):
            return True
        lowered = text.lower()
        return any(term in lowered for term in self._terms)
