"""
Root Typer application for the content-catalog CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from content_catalog.cli.serve import serve

app = Typer(
    name="content-catalog",
    help="content-catalog — a cached content catalog service.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        from content_catalog import __version__

        try:
            v = pkg_version("content-catalog")
        except PackageNotFoundError:
            v = __version__
        typer.echo(f"content-catalog {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """content-catalog CLI — run the catalog API."""


app.command("serve", help="Start the API server.")(serve)


if __name__ == "__main__":
    app()
