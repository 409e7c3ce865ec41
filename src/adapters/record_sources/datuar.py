"""Fuente: Datuar (padrón de personas).

- POST form-urlencoded a `pedido.php`; el sitio espera el DNI en `dni` y en
  `criterio` (ambos con el mismo valor).
- Los datos de la persona vienen en elementos con la clase tipográfica
  `f_gotham_book text-dark small`.
- Se respeta el orden del documento (nombre, domicilio, etc. en ese orden).
"""

from __future__ import annotations

from adapters.record_sources.base import HtmlRecordSource
from core.domain.models import SourceCategory


class DatuarSource(HtmlRecordSource):
    name = "Datuar"
    category = SourceCategory.PERSONAL

    url = "https://datuar.com/pedido.php"
    method = "POST"
    referer = "https://datuar.com/"
    form_fields = ("dni", "criterio")

    selectors = (".f_gotham_book.text-dark.small",)
    max_items = 15
