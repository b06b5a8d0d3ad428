"""CLI `sccp`: prefija los tags de cada API de un combine-config.

Flujo: cargar config -> (descargar OAS -> prefijar tags) por API -> escribir
`combined-config<ext>` en el directorio actual. Cualquier error aborta con
código 1 y sin fichero de salida.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.config_loader import load_combine_config
from adapters.config_writer import output_path_for, write_combine_config
from adapters.http_client import build_http_client
from adapters.oas_fetcher import HttpOpenAPIFetcher
from cli.ui_components import build_console_hooks, build_summary_table, print_usage
from core.config import AppSettings
from core.errors import ArgumentError, SccpError
from core.services.combine_pipeline import run_combine_pipeline

app = typer.Typer(
    add_completion=False,
    help="Prefix the operation tags of every API in a swagger-combine config with the API title.",
)

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


def _run(config_path: Path, settings: AppSettings) -> Path:
    config = load_combine_config(config_path)

    with build_http_client(settings) as client:
        result = run_combine_pipeline(
            config,
            HttpOpenAPIFetcher(client),
            hooks=build_console_hooks(_console),
        )

    output_path = output_path_for(config_path)
    write_combine_config(config=result.config, output_path=output_path)

    if result.outcomes:
        _console.print(build_summary_table(result.outcomes))
    _console.print(f" Wrote {escape(str(output_path))}\n")
    return output_path


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def prefix(
    ctx: typer.Context,
    config_path: Path | None = typer.Argument(
        None,
        help="Path to the swagger-combine config file (.json, .yaml or .yml).",
        show_default=False,
    ),
) -> None:
    """Fetch every API document and write combined-config<ext> with prefixed tags."""

    try:
        if config_path is None or ctx.args:
            raise ArgumentError("expected exactly one argument")

        _console.print(f"\n Using {escape(str(config_path))}\n")
        _run(config_path, AppSettings())
    except ArgumentError:
        print_usage(_console)
        raise typer.Exit(code=1)
    except SccpError as exc:
        _err_console.print(f" [red]Error:[/red] {escape(str(exc))}\n exiting\n")
        raise typer.Exit(code=exc.exit_code)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
