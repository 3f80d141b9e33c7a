"""Protocol-based interfaces for Durland collaborators.

The tick engine only depends on these contracts, so strategies and report
sinks can be swapped or faked in tests.
"""

from durland.interfaces.reporting import IReportSink
from durland.interfaces.strategy import IStrategy

__all__ = [
    "IReportSink",
    "IStrategy",
]
