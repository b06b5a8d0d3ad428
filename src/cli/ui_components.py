"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica del comando con detalles visuales.
- Los hooks del pipeline se construyen aquí y solo imprimen.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.services.combine_pipeline import ApiOutcome, PipelineHooks
from core.services.tag_prefixer import PrefixResult

USAGE = "Usage: sccp <file path to swagger-combine config file>"


def build_console_hooks(console: Console) -> PipelineHooks:
    """Hooks que imprimen el progreso línea a línea."""

    def api_start(url: str) -> None:
        console.print(f" Working on API {escape(url)}")

    def api_title(prefix: str) -> None:
        console.print(f" Found API name: {escape(prefix)}")

    def tag_found(tag: str) -> None:
        console.print(f" Found tag: {escape(tag)}")

    def api_done(url: str, result: PrefixResult) -> None:
        for tag in result.added:
            console.print(f" Added tag: {escape(tag)}")
        console.print()

    return PipelineHooks(
        api_start=api_start,
        api_title=api_title,
        tag_found=tag_found,
        api_done=api_done,
    )


def build_summary_table(outcomes: list[ApiOutcome]) -> Table:
    """Una fila por API: prefijo, tags renombrados y tags añadidos."""

    table = Table(title="Tag prefixes")
    table.add_column("API", style="cyan", overflow="fold")
    table.add_column("Prefix", style="white")
    table.add_column("Renamed", style="green", justify="right")
    table.add_column("Added", style="magenta")
    for outcome in outcomes:
        result = outcome.result
        table.add_row(
            escape(outcome.url),
            escape(result.prefix),
            str(len(result.renamed)),
            escape(", ".join(result.added)) if result.added else "-",
        )
    return table


def print_usage(console: Console) -> None:
    console.print(f"\n Wrong arguments\n {USAGE}\n exiting\n", markup=False)
