"""Document Fetcher sobre httpx.

Descarga el documento OpenAPI de cada API y lo decodifica según la
extensión de la URL. Sin reintentos: cualquier fallo es fatal.
"""

from __future__ import annotations

import json

import httpx
import yaml
from pydantic import ValidationError

from core.domain.models import OpenAPIDoc
from core.errors import DocParseError, FetchError
from core.formats import decode, url_format
from core.interfaces.fetcher import OpenAPIFetcher


class HttpOpenAPIFetcher(OpenAPIFetcher):
    """Implementa `OpenAPIFetcher` con un `httpx.Client` compartido."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def fetch(self, url: str) -> OpenAPIDoc:
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError("Couldn't read OpenAPI file", source=url) from exc

        if not response.is_success:
            raise FetchError(
                f"Couldn't read OpenAPI file, server answered HTTP {response.status_code}",
                source=url,
            )

        return parse_openapi_document(response.content, url=url)


def parse_openapi_document(raw: bytes, *, url: str) -> OpenAPIDoc:
    fmt = url_format(url)
    try:
        data = decode(raw, fmt)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
        raise DocParseError(f"Couldn't parse OpenAPI file as {fmt.value}", source=url) from exc

    if not isinstance(data, dict):
        raise DocParseError(
            f"OpenAPI file must contain a {fmt.value} object, got {type(data).__name__}",
            source=url,
        )

    try:
        return OpenAPIDoc.model_validate(data)
    except ValidationError as exc:
        raise DocParseError("OpenAPI file has an unexpected shape", source=url) from exc
