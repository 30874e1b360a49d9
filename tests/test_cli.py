from __future__ import annotations

import pytest
from typer.testing import CliRunner

from cli import devices
from cli.devices import OutputDevice
from cli.main import app
from tests.conftest import EventLog, LoggingSink

runner = CliRunner()


def _printed(stdout: str, prefix: str) -> list[str]:
    return [line for line in stdout.splitlines() if line.startswith(prefix)]


def test_copy_keyboard_to_printer() -> None:
    result = runner.invoke(app, ["copy", "--no-summary"])
    assert result.exit_code == 0, result.output
    assert len(_printed(result.stdout, "Printer.write prints ")) == 10


def test_copy_is_reproducible_with_seed() -> None:
    first = runner.invoke(app, ["copy", "--input", "tape", "--seed", "42", "--no-summary"])
    second = runner.invoke(app, ["copy", "--input", "tape", "--seed", "42", "--no-summary"])
    assert first.exit_code == second.exit_code == 0
    assert first.stdout == second.stdout


def test_copy_to_network_printer_uses_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COPY_PROGRAM_NETWORK_PRINTER_HOST", "lp9")
    result = runner.invoke(app, ["copy", "-o", "network", "-n", "3", "--no-summary"])
    assert result.exit_code == 0, result.output
    assert len(_printed(result.stdout, "NetworkPrinter.write [lp9] prints ")) == 3


def test_crazy_device_on_both_sides() -> None:
    result = runner.invoke(app, ["copy", "-i", "crazy", "-o", "crazy", "--no-summary"])
    assert result.exit_code == 0, result.output
    assert len(_printed(result.stdout, "CrazyPrinterCopier.write prints ")) == 10


def test_summary_panel_is_shown() -> None:
    result = runner.invoke(app, ["copy", "--count", "2"])
    assert result.exit_code == 0, result.output
    assert "Copy complete" in result.stdout
    assert "Transferred: 2" in result.stdout


def test_unknown_device_is_rejected() -> None:
    result = runner.invoke(app, ["copy", "--input", "floppy"])
    assert result.exit_code != 0


def test_failing_sink_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    log = EventLog()
    monkeypatch.setitem(devices.OUTPUT_FACTORIES, OutputDevice.PRINTER, lambda ctx: LoggingSink(log, fail_on=5))

    result = runner.invoke(app, ["copy", "--no-summary"])

    assert result.exit_code == 1
    assert len(log.writes()) == 4
    assert "Copy failed:" in result.stdout
    assert "paper jam" in result.stdout


def test_ducks_command() -> None:
    result = runner.invoke(app, ["ducks"])
    assert result.exit_code == 0, result.output
    assert "Mallard: yay, I can fly!" in result.stdout
    assert "CanadaGoose: this is default behaviour" in result.stdout
    assert "Decoy" not in result.stdout
    assert "2/4 ducks flew" in result.stdout


def test_doctor_lists_devices_and_settings() -> None:
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 0, result.output
    assert "CrazyPrinterCopier" in result.stdout
    assert "transfer_count" in result.stdout


def test_invalid_environment_is_reported_as_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COPY_PROGRAM_TRANSFER_COUNT", "-1")
    result = runner.invoke(app, ["ducks"])
    assert result.exit_code == 2
    assert "Invalid configuration:" in result.stdout
    assert "--log-level" not in result.output


def test_invalid_log_level_flag_names_the_flag() -> None:
    result = runner.invoke(app, ["--log-level", "loud", "ducks"])
    assert result.exit_code == 2
    assert "--log-level" in result.output


def test_count_above_limit_is_rejected() -> None:
    result = runner.invoke(app, ["copy", "--count", "10001", "--no-summary"])
    assert result.exit_code == 2
    assert "Printer.write prints" not in result.stdout
