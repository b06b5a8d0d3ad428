"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout y User-Agent para todas las descargas de OAS.
- Facilita testeo: los tests construyen el cliente con un `MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_http_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros."""

    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    )
