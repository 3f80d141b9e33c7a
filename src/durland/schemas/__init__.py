from .report import RunSummary, TickReport

__all__ = [
    "RunSummary",
    "TickReport",
]
