"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los alias camelCase son el contrato JSON que consume el front-end.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Se construyen por request y no se mutan después.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

T = TypeVar("T")


class SourceCategory(str, Enum):
    """Clasificación informativa de una fuente (no afecta el control de flujo)."""

    PERSONAL = "Personal"
    FISCAL = "Fiscal"
    JUDICIAL = "Judicial"
    OTROS = "Otros"


class SourceStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class SourceResult(BaseModel):
    """Resultado de una fuente externa para un request.

    Por qué existe:
    - Unifica el resultado de todos los adaptadores en una estructura común.
    - Un fallo de transporte, un timeout o una respuesta vacía se representan
      aquí (con mensajes distintos) en lugar de abortar el request completo.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    source_name: str = Field(
        ...,
        alias="sourceName",
        min_length=1,
        max_length=64,
        description="Nombre legible del sitio consultado.",
    )
    category: SourceCategory | None = Field(
        default=None,
        description="Clasificación gruesa de la fuente.",
    )
    items: list[str] = Field(
        default_factory=list,
        description="Fragmentos de texto limpios, distintos y en orden.",
    )
    status: SourceStatus = Field(
        ...,
        description="`success` si `items` no está vacío, `error` en otro caso.",
    )
    message: str | None = Field(
        default=None,
        description="Explicación legible; presente siempre que `status=error`.",
    )
    metadata: dict[str, str] = Field(
        default_factory=dict,
        description="Datos de diagnóstico (motivo del fallo, status HTTP).",
    )

    @model_validator(mode="after")
    def _check_status(self) -> "SourceResult":
        if (self.status is SourceStatus.SUCCESS) != bool(self.items):
            raise ValueError("status must be 'success' exactly when items is non-empty")
        if self.status is SourceStatus.ERROR and not self.message:
            raise ValueError("error results require a message")
        return self

    @classmethod
    def success(
        cls,
        *,
        source_name: str,
        items: list[str],
        category: SourceCategory | None = None,
        metadata: dict[str, str] | None = None,
    ) -> "SourceResult":
        return cls(
            source_name=source_name,
            category=category,
            items=list(items),
            status=SourceStatus.SUCCESS,
            metadata=metadata or {},
        )

    @classmethod
    def failure(
        cls,
        *,
        source_name: str,
        message: str,
        category: SourceCategory | None = None,
        metadata: dict[str, str] | None = None,
    ) -> "SourceResult":
        return cls(
            source_name=source_name,
            category=category,
            items=[],
            status=SourceStatus.ERROR,
            message=message,
            metadata=metadata or {},
        )

    @property
    def ok(self) -> bool:
        return self.status is SourceStatus.SUCCESS


class LookupResponse(BaseModel):
    """Agregado principal: el resultado combinado de todas las fuentes.

    Invariante: `len(sources)` es igual a la cantidad de adaptadores
    registrados, en orden de registro.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sources: list[SourceResult] = Field(
        default_factory=list,
        description="Un resultado por fuente, en orden de registro.",
    )
    search_id: str | None = Field(
        default=None,
        alias="searchId",
        description="Identificador único generado por request.",
    )
    timestamp: datetime | None = Field(
        default=None,
        description="Momento de finalización del request (UTC).",
    )
    engine_version: str | None = Field(
        default=None,
        alias="engineVersion",
        description="Tag estático de build.",
    )


class ApiResponse(BaseModel, Generic[T]):
    """Envelope exterior: exactamente uno de `data`/`error` está presente."""

    success: bool
    data: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse[Any]":
        return cls(success=False, error=error)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
