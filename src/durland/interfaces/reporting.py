"""Reporting Sink Protocol Interface."""

from typing import Protocol

from durland.schemas.report import RunSummary, TickReport


class IReportSink(Protocol):
    """Protocol for consumers of tick outcomes."""

    def report_tick(self, report: TickReport) -> None:
        """Receive the outcome of one tick, including the terminal one."""
        ...

    def report_summary(self, summary: RunSummary) -> None:
        """Receive the summary once the run has stopped."""
        ...
