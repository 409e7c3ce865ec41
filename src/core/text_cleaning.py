"""Normalización de fragmentos de texto extraídos de HTML.

`normalize_text` es idempotente: aplicarla sobre su propia salida no cambia
el resultado.
"""

from __future__ import annotations

import re

_NBSP_ENTITY = re.compile(r"&(?:nbsp|#160|#x0*a0);", re.IGNORECASE)
# Todo lo que no sea ASCII imprimible, Latin-1/Latin extendido imprimible o espacio.
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E\u00A1-\u024F\s]")
_WHITESPACE = re.compile(r"\s+")
_TRAILING_ELLIPSIS = re.compile(r"\.{3,}$")


def normalize_text(text: str | None) -> str:
    if not text:
        return ""

    cleaned = text.replace("\u00a0", " ")
    cleaned = _NON_PRINTABLE.sub("", cleaned)
    cleaned = _NBSP_ENTITY.sub(" ", cleaned)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    while _TRAILING_ELLIPSIS.search(cleaned):
        cleaned = _TRAILING_ELLIPSIS.sub("", cleaned).rstrip()
    return cleaned


def dedupe_preserving_order(values: list[str]) -> list[str]:
    """Remove duplicated strings keeping the first occurrence."""

    seen: set[str] = set()
    deduped: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        deduped.append(value)
    return deduped
