"""Carga del combine-config.

Soporta:
- `.yaml` / `.yml` -> YAML (`core.formats.TextScalarLoader`)
- cualquier otra extensión -> JSON
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from core.domain.models import CombineConfig
from core.errors import ConfigParseError, ConfigReadError
from core.formats import config_format, decode


def load_combine_config(path: Path) -> CombineConfig:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigReadError("Couldn't read config file", source=str(path)) from exc

    return parse_combine_config(raw, fmt_hint=path.name, source=str(path))


def parse_combine_config(raw: bytes, *, fmt_hint: str, source: str | None = None) -> CombineConfig:
    fmt = config_format(fmt_hint)
    try:
        data = decode(raw, fmt)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"Couldn't parse config file as {fmt.value}", source=source) from exc

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Config file must contain a {fmt.value} object, got {type(data).__name__}",
            source=source,
        )

    try:
        return CombineConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigParseError("Config file has an unexpected shape", source=source) from exc
