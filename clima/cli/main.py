#!/usr/bin/env python3
"""
Main CLI application entry point.

    clima            start the TUI
    clima --debug    also write every controller event to dev/debug.log
"""

from typing import Optional

import typer
from rich.console import Console

from clima.cli.config import ClimaConfig
from clima.openmeteo.client import OpenMeteoClient
from clima.store.recent import RecentLocationStore
from clima.tui.app import ClimaApp
from clima.tui.logging_config import setup_debug_logging
from clima.tui.router import Router

console = Console(stderr=True)

app = typer.Typer(
    name="clima",
    help="Look up the weather for a place, right in the terminal",
    add_completion=False
)


@app.command()
def run(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Save event log to dev/debug.log (truncated on start)"
    ),
):
    """
    Start the interactive weather browser.
    """
    try:
        config = ClimaConfig.from_env()
    except ValueError as e:
        # pydantic's ValidationError is a ValueError too
        console.print(f"[red]Invalid CLIMA_* configuration: {e}[/red]")
        raise typer.Exit(code=1)

    sink = None
    if debug:
        try:
            sink = setup_debug_logging(config.debug_log)
        except OSError as e:
            console.print(f"[red]Failed to set up debug log file {config.debug_log}: {e}[/red]")
            raise typer.Exit(code=1)

    client = OpenMeteoClient(
        geocoding_url=config.geocoding_url,
        forecast_url=config.forecast_url,
        timeout=config.request_timeout,
    )
    router = Router(
        client=client,
        store=RecentLocationStore(config.recent_path),
        search_count=config.search_count,
        sink=sink,
    )

    tui = ClimaApp(router)
    try:
        tui.run()
    except Exception as e:
        console.print(f"[red]TUI program run failed: {e}[/red]")
        raise typer.Exit(code=1)
    finally:
        client.close()

    return_code: Optional[int] = tui.return_code
    if return_code:
        console.print(f"[red]TUI program run failed (exit status {return_code})[/red]")
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
