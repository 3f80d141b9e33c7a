"""Report sinks for simulation runs."""

from __future__ import annotations

import sys
from typing import TextIO

from durland.schemas.report import RunSummary, TickReport


def format_tick(report: TickReport) -> str:
    """Render a tick as ``tick: 0001 Ok``."""

    return f"tick: {report.tick:04d} {report.result}"


class ConsoleReporter:
    """Print one status line per tick."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def report_tick(self, report: TickReport) -> None:
        print(format_tick(report), file=self._stream or sys.stdout)

    def report_summary(self, summary: RunSummary) -> None:
        """Nothing to print; the terminal tick line ends the output."""


class CollectingReporter:
    """Keep every report in memory."""

    def __init__(self) -> None:
        self.ticks: list[TickReport] = []
        self.summary: RunSummary | None = None

    def report_tick(self, report: TickReport) -> None:
        self.ticks.append(report)

    def report_summary(self, summary: RunSummary) -> None:
        self.summary = summary
