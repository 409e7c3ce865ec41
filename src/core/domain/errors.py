"""Taxonomía de errores del dominio.

Los errores de fuente (`SourceError`) se capturan dentro de cada adaptador y
se convierten en un `SourceResult` con `status=error`. Solo `InvalidInputError`,
`NoResultsFoundError` e `InternalFaultError` llegan a la capa HTTP.
"""

from __future__ import annotations


class DniLookupError(Exception):
    """Base exception for all lookup errors."""
    pass


class InvalidInputError(DniLookupError):
    """Raised when the identifier is not a non-empty string of digits."""

    def __init__(self, message: str = "Un número de DNI válido es requerido."):
        super().__init__(message)


class SourceError(DniLookupError):
    """Base exception for failures local to one external source."""

    reason = "error"

    def __init__(self, source_name: str, message: str):
        self.source_name = source_name
        super().__init__(message)


class SourceTimeoutError(SourceError):
    """Raised when a source exceeds its deadline."""

    reason = "timeout"

    def __init__(self, source_name: str):
        super().__init__(source_name, f"{source_name} no respondió a tiempo.")


class SourceTransportError(SourceError):
    """Raised on network failures or non-success HTTP status."""

    reason = "transport"

    def __init__(self, source_name: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(source_name, f"Error al conectar con {source_name}.")


class SourceEmptyError(SourceError):
    """Raised when a source answered but no item survived the filters."""

    reason = "empty"

    def __init__(self, source_name: str):
        super().__init__(source_name, f"No se encontraron registros en {source_name}.")


class NoResultsFoundError(DniLookupError):
    """Raised when no source produced data."""

    def __init__(self, message: str = "No se encontraron resultados para el DNI ingresado."):
        super().__init__(message)


class SourcesUnavailableError(NoResultsFoundError):
    """Raised when every source failed at the transport level."""

    def __init__(self, message: str = "Error al conectar con los servicios externos."):
        super().__init__(message)


class InternalFaultError(DniLookupError):
    """Raised on unexpected exceptions during orchestration."""

    def __init__(self, message: str = "Error interno al procesar la solicitud."):
        super().__init__(message)
