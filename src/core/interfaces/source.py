"""Contratos de fuentes de registros públicos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que adaptadores (Datuar, CuitOnline, etc.) sean intercambiables
  y testeables sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import SourceCategory, SourceResult


@runtime_checkable
class RecordSource(Protocol):
    """Contrato mínimo para una fuente externa.

    Reglas de diseño:
    - `fetch_source` es asíncrono porque hace I/O (HTTP).
    - Devuelve un único `SourceResult` por fuente; los fallos de transporte,
      timeouts y respuestas vacías se devuelven como `status=error`.
    """

    name: str
    category: SourceCategory | None

    async def fetch_source(self, dni: str) -> SourceResult:
        """Consulta la fuente para un `dni` ya validado y devuelve el resultado normalizado."""

        ...
