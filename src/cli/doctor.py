"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.record_sources import SOURCE_CLASSES
from core.config import AppSettings
from core.resources_loader import get_default_noise_terms_path, load_noise_terms

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


async def _check_sources(settings: AppSettings) -> list[tuple[str, bool, str]]:
    targets = [(cls.name, cls.referer or cls.url) for cls in SOURCE_CLASSES]
    checks = await asyncio.gather(*(_check_http(url, settings) for _, url in targets))
    return [(name, ok, detail) for (name, _), (ok, detail) in zip(targets, checks)]


def _check_noise_terms(settings: AppSettings) -> tuple[bool, str]:
    path = settings.noise_terms_path or get_default_noise_terms_path()
    try:
        terms = load_noise_terms(settings.noise_terms_path)
    except (OSError, ValueError) as exc:
        return False, f"{path}: {exc}"
    return True, f"{len(terms)} terms ({path})"


@app.command()
def run() -> None:
    """Run baseline diagnostics against every registered source."""

    settings = AppSettings()

    table = Table(title="OSINT-DNI Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s per source")
    ok_terms, detail_terms = _check_noise_terms(settings)
    table.add_row("Noise terms", "OK" if ok_terms else "FAIL", detail_terms)

    # Connectivity (best-effort)
    for name, ok, detail in asyncio.run(_check_sources(settings)):
        table.add_row(f"HTTP {name}", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if not ok_terms:
        raise typer.Exit(code=1)
