"""Selección de formato por extensión y decodificación de bytes.

Reglas:
- combine-config: `.yaml` / `.yml` -> YAML, cualquier otra cosa -> JSON.
- documento OpenAPI: solo una URL cuyo path acaba en `.yaml` es YAML.

YAML se lee con `TextScalarLoader`: floats y fechas sin comillas
(`version: 1.10`, `version: 2021-01-01`) se quedan como el texto escrito.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlsplit

import yaml


class DocumentFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


_CONFIG_YAML_SUFFIXES = (".yaml", ".yml")
_URL_YAML_SUFFIXES = (".yaml",)

_TEXT_TAGS = {"tag:yaml.org,2002:float", "tag:yaml.org,2002:timestamp"}


class TextScalarLoader(yaml.SafeLoader):
    """`SafeLoader` sin los resolvers implícitos de float y timestamp."""


TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def config_format(path: str) -> DocumentFormat:
    suffix = PurePosixPath(str(path)).suffix.lower()
    if suffix in _CONFIG_YAML_SUFFIXES:
        return DocumentFormat.YAML
    return DocumentFormat.JSON


def url_format(url: str) -> DocumentFormat:
    suffix = PurePosixPath(urlsplit(url).path).suffix.lower()
    if suffix in _URL_YAML_SUFFIXES:
        return DocumentFormat.YAML
    return DocumentFormat.JSON


def decode(raw: bytes, fmt: DocumentFormat) -> Any:
    """Decodifica `raw` según `fmt`.

    Propaga `json.JSONDecodeError`, `yaml.YAMLError` o `UnicodeDecodeError`;
    cada adaptador los traduce a su propio error.
    """

    if fmt is DocumentFormat.YAML:
        return yaml.load(raw, Loader=TextScalarLoader)  # nosec B506: SafeLoader subclass
    return json.loads(raw)
