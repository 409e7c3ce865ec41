"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import LookupResponse


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (`--json`).
    """

    title = Text("OSINT-DNI", style="bold cyan")
    subtitle = Text("Consulta de registros públicos • Múltiples fuentes", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_sources_table(response: LookupResponse) -> Table:
    """Una fila por fuente, en orden de registro."""

    table = Table(title=f"Resultados ({response.search_id})", show_lines=True)
    table.add_column("Fuente", style="cyan", no_wrap=True)
    table.add_column("Categoría", style="dim")
    table.add_column("Estado", no_wrap=True)
    table.add_column("Registros", style="white")

    for source in response.sources:
        category = source.category.value if source.category else "-"
        if source.ok:
            status = Text("OK", style="green")
            detail = Text("\n".join(source.items))
        else:
            status = Text("ERROR", style="red")
            detail = Text(source.message or "")
        # Texto scrapeado: `Text` evita que Rich lo interprete como markup.
        table.add_row(Text(source.source_name), category, status, detail)
    return table
