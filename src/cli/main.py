"""CLI (Typer).

Comandos:
- `lookup DNI`: consulta todas las fuentes y muestra una tabla (o JSON).
- `serve`: levanta la API HTTP con uvicorn.
- `doctor run`: diagnósticos de entorno.
"""

from __future__ import annotations

import asyncio
import json

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import build_sources_table, print_banner
from core.config import AppSettings
from core.domain.errors import DniLookupError, InvalidInputError
from core.domain.models import ApiResponse, LookupResponse
from core.logging import configure_logging
from core.services.lookup_pipeline import lookup

app = typer.Typer(no_args_is_help=True, help="Consulta de DNI en múltiples fuentes públicas.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.command(name="lookup")
def lookup_command(
    dni: str = typer.Argument(..., help="Número de DNI (solo dígitos)."),
    as_json: bool = typer.Option(False, "--json", help="Imprime el envelope JSON de la API."),
) -> None:
    """Consulta un DNI en todas las fuentes registradas."""

    settings = AppSettings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    try:
        response = asyncio.run(lookup(dni, settings=settings))
    except DniLookupError as exc:
        if as_json:
            typer.echo(json.dumps(ApiResponse.fail(str(exc)).to_json(), ensure_ascii=False))
        else:
            _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2 if isinstance(exc, InvalidInputError) else 1)

    if as_json:
        envelope = ApiResponse[LookupResponse].ok(response)
        typer.echo(json.dumps(envelope.to_json(), ensure_ascii=False, indent=2))
        return

    print_banner(_console)
    _console.print(build_sources_table(response))


@app.command()
def serve(
    host: str = typer.Option(None, help="Host (default: OSINT_DNI_HOST)."),
    port: int = typer.Option(None, help="Puerto (default: OSINT_DNI_PORT)."),
    reload: bool = typer.Option(False, help="Recarga automática (desarrollo)."),
) -> None:
    """Levanta la API HTTP (`POST /api/lookup`)."""

    import uvicorn  # noqa: PLC0415

    settings = AppSettings()
    uvicorn.run(
        "api.app:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
