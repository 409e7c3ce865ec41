"""Fuente: Dateas (consulta de CUIT/CUIL).

El resultado es una tabla; cada fila (`<tr>`) se reduce a una sola línea
uniendo sus celdas, así una persona no queda partida en fragmentos sueltos.
"""

from __future__ import annotations

from adapters.http_client import select_table_rows
from adapters.record_sources.base import HtmlRecordSource
from core.domain.models import SourceCategory


class DateasSource(HtmlRecordSource):
    name = "Dateas"
    category = SourceCategory.OTROS

    url = "https://www.dateas.com/es/consulta_cuit_cuil"
    referer = "https://www.dateas.com/"
    query_fields = ("cuit",)

    selectors = ("table.data-table",)
    max_items = 12
    sort_by_length = True

    def collect_candidates(self, html: str) -> list[str]:
        candidates: list[str] = []
        for selector in self.selectors:
            candidates.extend(select_table_rows(html=html, table_selector=selector))
        return candidates
