"""Errores del tool.

Todos son fatales: la CLI los captura, imprime el mensaje (con la causa
original encadenada) y sale con código 1 sin escribir nada.
"""

from __future__ import annotations


class SccpError(Exception):
    """Base de todos los errores esperados del tool."""

    exit_code = 1

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        text = self.message
        if self.source:
            text = f"{text} ({self.source})"
        cause = self.__cause__
        if cause is not None:
            text = f"{text}: {cause}"
        return text


class ArgumentError(SccpError):
    """Número de argumentos incorrecto en la CLI."""


class ConfigReadError(SccpError):
    """No se pudo abrir o leer el fichero de configuración."""


class ConfigParseError(SccpError):
    """El combine-config no es JSON/YAML válido o no tiene la forma esperada."""


class FetchError(SccpError):
    """Fallo de red o respuesta no exitosa al pedir un documento OpenAPI."""


class DocParseError(SccpError):
    """El cuerpo del documento OpenAPI no se pudo interpretar."""


class WriteError(SccpError):
    """No se pudo serializar o escribir el combine-config resultante."""
