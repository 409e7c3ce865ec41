"""Cargador de recursos/datasets.

Este módulo vive en `core/` porque:
- centraliza el *qué* datos necesitamos (lista de términos de ruido) sin
  acoplarse a la API ni a la CLI
- evita duplicar lógica de paths en adaptadores.

La lista por defecto viaja dentro del paquete (`core/data/`); se puede
reemplazar sin tocar código apuntando `OSINT_DNI_NOISE_TERMS_PATH` a otro JSON.
"""

from __future__ import annotations

import json
from pathlib import Path

NOISE_TERMS_FILENAME = "noise_terms.json"


def _package_data_dir() -> Path:
    # core/resources_loader.py -> core -> core/data
    return Path(__file__).resolve().parent / "data"


def get_default_noise_terms_path() -> Path:
    return _package_data_dir() / NOISE_TERMS_FILENAME


def load_noise_terms(path: Path | None = None) -> list[str]:
    """Carga los términos de ruido desde JSON.

    Formatos aceptados:
    - `["término", ...]`
    - `{"terms": ["término", ...]}`

    Devuelve los términos en minúsculas, sin vacíos ni duplicados.
    """

    source = path or get_default_noise_terms_path()
    data = json.loads(source.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("terms", [])
    if not isinstance(data, list):
        raise ValueError(f"Invalid noise terms file (expected a list): {source}")

    terms: list[str] = []
    for raw in data:
        if not isinstance(raw, str):
            continue
        term = raw.strip().lower()
        if term and term not in terms:
            terms.append(term)
    return terms
