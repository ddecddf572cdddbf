"""Typer CLI root application with serve command."""

import typer

from election_results_api.core.config import get_settings
from election_results_api.core.logging import setup_logging

app = typer.Typer(name="election-results-api", help="Election results file server CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str | None = typer.Option(None, "--host", help="Bind host (defaults to HOST setting)"),
    port: int | None = typer.Option(None, "--port", help="Bind port (defaults to PORT setting)"),
) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "election_results_api.main:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from election_results_api.cli.datasets_cmd import datasets_app

    app.add_typer(datasets_app, name="datasets", help="Inspect the election result data tree")


_register_subcommands()
