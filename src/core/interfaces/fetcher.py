"""Contrato del Document Fetcher.

Por qué Protocol:
- El pipeline solo necesita "dame el OAS de esta URL"; con un contrato
  estructural los tests pueden pasar un stub sin red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import OpenAPIDoc


@runtime_checkable
class OpenAPIFetcher(Protocol):
    """Contrato mínimo para obtener un documento OpenAPI.

    Reglas de diseño:
    - `fetch` es síncrono: las APIs se procesan una a una, en orden.
    - Falla con `FetchError` / `DocParseError`, nunca devuelve `None`.
    """

    def fetch(self, url: str) -> OpenAPIDoc:
        """Descarga y decodifica el documento OpenAPI en `url`."""

        ...
