"""Orquestación del flujo completo sobre un combine-config ya cargado.

El pipeline recorre las APIs en el orden declarado: descarga el OAS,
prefija sus tags y muta la entrada correspondiente. No imprime nada; la CLI
recibe los eventos mediante `PipelineHooks`. Cualquier error del fetcher se
propaga tal cual y aborta la ejecución antes de escribir.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from core.domain.models import CombineConfig
from core.interfaces.fetcher import OpenAPIFetcher
from core.services.tag_prefixer import PrefixResult, build_prefix, prefix_api_tags


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress)."""

    api_start: Callable[[str], None] | None = None
    api_title: Callable[[str], None] | None = None
    tag_found: Callable[[str], None] | None = None
    api_done: Callable[[str, PrefixResult], None] | None = None


@dataclass
class ApiOutcome:
    url: str
    result: PrefixResult


@dataclass
class PipelineResult:
    """Output of a pipeline invocation."""

    config: CombineConfig
    outcomes: list[ApiOutcome] = field(default_factory=list)


def run_combine_pipeline(
    config: CombineConfig,
    fetcher: OpenAPIFetcher,
    *,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    """Prefija los tags de cada API de `config` (in place) y devuelve el resumen."""

    hooks = hooks or PipelineHooks()
    outcome = PipelineResult(config=config)

    for api in config.apis:
        if hooks.api_start:
            hooks.api_start(api.url)

        doc = fetcher.fetch(api.url)
        if hooks.api_title:
            hooks.api_title(build_prefix(doc.info.title))

        result = prefix_api_tags(doc, api, on_tag=hooks.tag_found)
        outcome.outcomes.append(ApiOutcome(url=api.url, result=result))
        if hooks.api_done:
            hooks.api_done(api.url, result)

    return outcome
