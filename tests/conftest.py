from __future__ import annotations

import io

import pytest
from rich.console import Console


class EventLog:
    """Shared log of device calls, in the order they happen."""

    def __init__(self) -> None:
        self.events: list[tuple[str, int]] = []

    def reads(self) -> list[int]:
        return [v for op, v in self.events if op == "read"]

    def writes(self) -> list[int]:
        return [v for op, v in self.events if op == "write"]


class LoggingSource:
    def __init__(self, log: EventLog, values: list[int] | None = None) -> None:
        self._log = log
        self._values = list(values) if values is not None else list(range(10))
        self._i = 0

    def read(self) -> int:
        value = self._values[self._i % len(self._values)]
        self._i += 1
        self._log.events.append(("read", value))
        return value


class LoggingSink:
    def __init__(self, log: EventLog, *, fail_on: int | None = None) -> None:
        self._log = log
        self._fail_on = fail_on
        self.calls = 0

    def write(self, value: int) -> None:
        self.calls += 1
        if self._fail_on is not None and self.calls == self._fail_on:
            raise OSError("paper jam")
        self._log.events.append(("write", value))


@pytest.fixture
def event_log() -> EventLog:
    return EventLog()


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=120, color_system=None)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in (
        "COPY_PROGRAM_TRANSFER_COUNT",
        "COPY_PROGRAM_RANDOM_SEED",
        "COPY_PROGRAM_NETWORK_PRINTER_HOST",
        "COPY_PROGRAM_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
