"""Fuente: CuitOnline (situación fiscal).

- GET al buscador público (`search.php?q=<dni>`).
- Cada resultado es un `.hit` con la denominación y las facetas del documento
  (CUIT/CUIL, tipo de persona, ganancias, IVA...).
- Listado ruidoso: tope de 10 (sobre el orden de documento) y orden por largo
  descendente.
"""

from __future__ import annotations

from adapters.record_sources.base import HtmlRecordSource
from core.domain.models import SourceCategory


class CuitOnlineSource(HtmlRecordSource):
    name = "CuitOnline"
    category = SourceCategory.FISCAL

    url = "https://www.cuitonline.com/search.php"
    referer = "https://www.cuitonline.com/"
    query_fields = ("q",)

    # Un solo selector agrupado: los matches salen en orden de documento
    # (nombre, facetas, nombre, facetas...) y el tope no descarta las facetas.
    selectors = (".hit .denominacion, .hit .doc-facets",)
    max_items = 10
    sort_by_length = True
