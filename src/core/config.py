"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la API ni la CLI.
- Permite que adaptadores (HTTP/scraping) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "osint-dni"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "osint-dni"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "osint-dni"
    return Path.home() / ".config" / "osint-dni"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para API/CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="OSINT_DNI_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=8.0,
        gt=0,
        description="Deadline por fuente externa (segundos).",
    )
    user_agent: str = Field(
        default=BROWSER_USER_AGENT,
        min_length=1,
        description="User-Agent de navegador para reducir bloqueos triviales.",
    )
    engine_version: str = Field(
        default="osint-dni/1.0",
        min_length=1,
        description="Tag de build expuesto en cada respuesta.",
    )
    noise_terms_path: Path | None = Field(
        default=None,
        description="JSON alternativo con los términos de ruido (lista de strings).",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )
    log_json: bool = Field(
        default=True,
        description="Emitir logs como JSON estructurado.",
    )

    cors_origins: list[str] = Field(
        default_factory=list,
        description="Orígenes extra permitidos por CORS para el front-end.",
    )
    host: str = Field(default="127.0.0.1", description="Host para `serve`.")
    port: int = Field(default=8000, ge=1, le=65535, description="Puerto para `serve`.")


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()
