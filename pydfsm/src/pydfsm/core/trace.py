from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from pydfsm.core.log import get_logger


@dataclass(frozen=True)
class StepRecord:
    """One transition taken while processing input."""

    index: int
    state: str
    symbol: str
    next_state: str

    def __str__(self) -> str:
        return f"(state: {self.state}, inputVal: {self.symbol}) -> {self.next_state}"


class TraceSink(Protocol):
    def start(self, state: str) -> None: ...

    def step(self, record: StepRecord) -> None: ...

    def end(self, state: str) -> None: ...


class LoggingTraceSink:
    """Writes each run as plain lines to a logger (``pydfsm.trace`` by default)."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO):
        self.logger = logger if logger is not None else get_logger("pydfsm.trace")
        self.level = level

    def start(self, state: str) -> None:
        self.logger.log(self.level, "Starting at state: %s", state)

    def step(self, record: StepRecord) -> None:
        self.logger.log(self.level, "%s", record)

    def end(self, state: str) -> None:
        self.logger.log(self.level, "Ending at state: %s", state)


@dataclass
class RecordingTraceSink:
    starts: list[str] = field(default_factory=list)
    records: list[StepRecord] = field(default_factory=list)
    ends: list[str] = field(default_factory=list)

    def start(self, state: str) -> None:
        self.starts.append(state)

    def step(self, record: StepRecord) -> None:
        self.records.append(record)

    def end(self, state: str) -> None:
        self.ends.append(state)

    def clear(self) -> None:
        self.starts.clear()
        self.records.clear()
        self.ends.clear()
