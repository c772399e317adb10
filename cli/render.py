from __future__ import annotations

from typing import Any, Iterable

import typer

from app.schemas import ReportDocument


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_document(document: ReportDocument) -> None:
    echo_heading("Temperature Report")
    echo_key_values([("updated", document.updated), ("sensors", len(document.sensors))])

    typer.echo()
    echo_heading("Readings")
    if not document.sensors:
        typer.echo("No sensors reported.")
        return
    for sensor in document.sensors:
        typer.echo(
            f"  - {sensor.rom_id} ({sensor.name}): "
            f"{sensor.celsius:.1f} C / {sensor.fahrenheit:.1f} F"
        )
