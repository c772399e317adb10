from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer
import uvicorn

from app.api import get_sensor_source
from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_document
from logging_config import configure_logging
from sensors.base import SensorError
from services.clock import SystemClock
from services.report import generate_report, parse_report
from settings import get_settings, read_test_mode


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for serving and reading one-wire temperature reports.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Bridge base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("fetch")
def fetch_command(
    ctx: typer.Context,
    raw: bool = typer.Option(False, "--raw", help="Print the XML exactly as served."),
) -> None:
    """Fetch the current report from a running bridge."""
    state = _get_state(ctx)
    body = state.client.fetch_report()
    if raw:
        typer.echo(body, nl=False)
        return
    try:
        document = parse_report(body)
    except ValueError as exc:
        typer.secho(f"Malformed report: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    render_document(document)


@app.command("report")
def report_command(
    test_mode: Optional[bool] = typer.Option(
        None,
        "--test-mode/--hardware",
        help="Use the stand-in sensors instead of sysfs (defaults to TEST_MODE=1).",
    ),
) -> None:
    """Generate a report locally without going through HTTP."""
    configure_logging()
    use_stand_in = read_test_mode() if test_mode is None else test_mode
    sensors = get_sensor_source(test_mode=use_stand_in)
    try:
        body = generate_report(SystemClock(), sensors)
    except SensorError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(body, nl=False)


@app.command("serve")
def serve_command(
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind."),
    port: Optional[int] = typer.Option(None, "--port", help="TCP port to listen on."),
) -> None:
    """Run the HTTP bridge."""
    configure_logging()
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )
