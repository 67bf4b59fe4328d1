"""
CLI: ``content-catalog serve`` — start the API server.

Options default to :class:`~content_catalog.api.settings.CatalogAPISettings`,
so ``CATALOG_HOST`` / ``CATALOG_PORT`` work without flags.
"""

from __future__ import annotations

import typer
import uvicorn
from pydantic import ValidationError

from content_catalog.api.settings import CatalogAPISettings
from content_catalog.cli.utils import console, err_console


def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    workers: int = typer.Option(1, "--workers", "-w", help="Number of workers"),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Start the content-catalog REST API server."""
    try:
        settings = CatalogAPISettings()
    except ValidationError as e:
        err_console.print(f"[bold red]Invalid settings:[/bold red] {e}")
        raise typer.Exit(code=1) from e
    host = host or settings.host
    port = port or settings.port
    log_level = (log_level or settings.log_level).lower()

    console.print(f"[bold green]Starting content-catalog API[/bold green] on {host}:{port}")
    console.print(
        f"  cache=[cyan]{settings.cache_backend}[/cyan]  "
        f"store latency=[cyan]{settings.store_latency_ms}ms[/cyan]  "
        f"docs=[cyan]http://{host}:{port}{settings.api_prefix}/docs[/cyan]"
    )
    uvicorn.run(
        "content_catalog.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )
