from __future__ import annotations

from typing import Any, Dict

import pytest
from typer.testing import CliRunner

from cli.app import app
from settings import get_settings

REPORT = (
    "<a updated='2020-01-01 00-00'>\n"
    "<owd>\n<Name>DS18B20</Name>\n<ROMId>28-0000</ROMId>\n"
    "<Temperature>21.5</Temperature>\n<TemperatureF>70.7</TemperatureF>\n</owd>\n"
    "</a>\n"
)


class StubClient:
    def __init__(self, config, body: str = REPORT) -> None:
        self.config = config
        self.body = body
        self.fetches = 0
        self.closed = False

    def fetch_report(self) -> str:
        self.fetches += 1
        return self.body

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _skip_logging_setup(monkeypatch) -> None:
    monkeypatch.setattr("cli.app.configure_logging", lambda: None)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _install_stub(monkeypatch, stub: StubClient) -> None:
    def factory(config):
        stub.config = config
        return stub

    monkeypatch.setattr("cli.app.ApiClient", factory)


def test_fetch_renders_readings(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["--base-url", "http://pi.local:8080/", "fetch"])

    assert result.exit_code == 0
    assert "Temperature Report" in result.stdout
    assert "updated: 2020-01-01 00-00" in result.stdout
    assert "28-0000 (DS18B20): 21.5 C / 70.7 F" in result.stdout
    assert stub.config.base_url == "http://pi.local:8080"
    assert stub.closed is True


def test_fetch_raw_prints_xml_verbatim(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None)
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["fetch", "--raw"])

    assert result.exit_code == 0
    assert result.stdout == REPORT


def test_fetch_rejects_malformed_report(monkeypatch, runner: CliRunner) -> None:
    stub = StubClient(config=None, body="not xml")
    _install_stub(monkeypatch, stub)

    result = runner.invoke(app, ["fetch"])

    assert result.exit_code == 1
    assert "Malformed report" in result.output


def test_report_command_uses_stand_in_sensors(runner: CliRunner) -> None:
    result = runner.invoke(app, ["report", "--test-mode"])

    assert result.exit_code == 0
    assert result.stdout.startswith("<a updated='")
    assert "<ROMId>id3</ROMId>" in result.stdout
    assert "<TemperatureF>-40.0</TemperatureF>" in result.stdout


def test_report_command_surfaces_hardware_errors(monkeypatch, runner: CliRunner, tmp_path) -> None:
    monkeypatch.setenv("W1_DEVICE_LIST_PATH", str(tmp_path / "missing"))
    monkeypatch.delenv("TEST_MODE", raising=False)
    get_settings.cache_clear()
    try:
        result = runner.invoke(app, ["report", "--hardware"])
    finally:
        get_settings.cache_clear()

    assert result.exit_code == 1
    assert "Error: Cannot read device list" in result.output


def test_serve_runs_uvicorn_with_settings(monkeypatch, runner: CliRunner) -> None:
    calls: Dict[str, Any] = {}

    def fake_run(target: str, **kwargs: Any) -> None:
        calls["target"] = target
        calls.update(kwargs)

    monkeypatch.setattr("cli.app.uvicorn.run", fake_run)

    result = runner.invoke(app, ["serve", "--port", "8080"])

    assert result.exit_code == 0
    assert calls["target"] == "app.main:app"
    assert calls["port"] == 8080
    assert calls["host"] == get_settings().host
