"""Wrapper de httpx + BeautifulSoup.

Por qué un wrapper:
- Estandariza timeouts y headers de navegador para que todas las fuentes se
  comporten igual.
- Facilita testeo: las fuentes se pueden probar con `respx` sin red.
"""

from __future__ import annotations

import httpx
from bs4 import BeautifulSoup

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults de navegador.

    Por qué un builder:
    - Centraliza timeout/User-Agent para que todas las fuentes se comporten igual.
    - Sin reintentos: un fallo se reporta tal cual en el resultado de la fuente.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "es-AR,es;q=0.9,en;q=0.6",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


def select_texts(*, html: str, selectors: tuple[str, ...]) -> list[str]:
    """Ejecuta selectores CSS y devuelve el texto crudo de cada match.

    El orden es: selector por selector, y dentro de cada uno, orden de documento.
    """

    if not html:
        return []

    soup = BeautifulSoup(html, "html.parser")
    texts: list[str] = []
    for selector in selectors:
        for element in soup.select(selector):
            texts.append(element.get_text(" "))
    return texts


def select_table_rows(*, html: str, table_selector: str, separator: str = " - ") -> list[str]:
    """Devuelve una línea de texto por fila (`<tr>`) de las tablas que matchean.

    Las celdas vacías se omiten; las filas de encabezado (`<th>` only) también.
    """

    if not html:
        return []

    soup = BeautifulSoup(html, "html.parser")
    rows: list[str] = []
    for table in soup.select(table_selector):
        for tr in table.find_all("tr"):
            cells = [td.get_text(" ").strip() for td in tr.find_all("td")]
            cells = [c for c in cells if c]
            if cells:
                rows.append(separator.join(cells))
    return rows
