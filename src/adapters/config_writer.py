"""Escritura del combine-config resultante.

El contenido es siempre JSON con indentación de 2 espacios, aunque el
fichero conserve la extensión del original (`combined-config.yaml`).
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import CombineConfig
from core.errors import WriteError

OUTPUT_BASENAME = "combined-config"


def output_path_for(config_path: Path, *, directory: Path | None = None) -> Path:
    """`<directory>/combined-config<ext>`, con `<ext>` la extensión del input."""

    directory = directory if directory is not None else Path.cwd()
    return directory / f"{OUTPUT_BASENAME}{config_path.suffix}"


def render_combine_config(config: CombineConfig) -> str:
    try:
        return json.dumps(config.to_payload(), ensure_ascii=False, indent=2) + "\n"
    except (TypeError, ValueError) as exc:
        raise WriteError("Couldn't serialize config to JSON") from exc


def write_combine_config(*, config: CombineConfig, output_path: Path) -> Path:
    """Serializa `config` y lo escribe en `output_path` (UTF-8)."""

    text = render_combine_config(config)
    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError("Couldn't write new config file", source=str(output_path)) from exc
    return output_path
