"""CLI commands for inspecting the election result data tree."""

import asyncio
import json
from typing import Annotated

import typer

from election_results_api.core.config import get_settings
from election_results_api.lib.result_store import ResultStore, ResultStoreError
from election_results_api.services import results_service

datasets_app = typer.Typer()

DataDirOption = Annotated[
    str | None,
    typer.Option("--data-dir", help="Result tree root (defaults to DATA_DIR setting)"),
]


def _get_store(data_dir: str | None) -> ResultStore:
    return ResultStore(data_dir or get_settings().data_dir)


@datasets_app.command("list")
def list_datasets(data_dir: DataDirOption = None) -> None:
    """List every result file as the URL path that serves it."""
    store = _get_store(data_dir)
    entries = store.list_datasets()
    if not entries:
        typer.echo(f"No result files found in {store.base_dir}")
        return

    for entry in entries:
        typer.echo(entry.key.url_path)
    typer.echo(f"{len(entries)} result file(s) in {store.base_dir}")


@datasets_app.command("show")
def show(
    election_type: Annotated[str, typer.Argument(help="Election type, e.g. general")],
    year: Annotated[str, typer.Argument(help="Election year")],
    county: Annotated[str | None, typer.Argument(help="County name for county-level results")] = None,
    data_dir: DataDirOption = None,
) -> None:
    """Print the result document for an election, or one of its counties."""
    store = _get_store(data_dir)
    if county is None:
        lookup = results_service.get_national_results(store, election_type, year)
    else:
        lookup = results_service.get_county_results(store, election_type, year, county)

    try:
        document = asyncio.run(lookup)
    except (ValueError, ResultStoreError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(json.dumps(document, indent=2, ensure_ascii=False))
