"""Metrics sinks receiving one record per HTTP response."""

import sys
from typing import Protocol


class MetricsSink(Protocol):
    def record(self, url: str, status_code: int) -> None: ...


class NullMetricsSink:
    """Sink that discards every record."""

    def record(self, url: str, status_code: int) -> None:
        return None


class ConsoleMetricsSink:
    """Print request URL and status to stderr when enabled."""

    def __init__(self, *, enabled: bool = True) -> None:
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def record(self, url: str, status_code: int) -> None:
        if not self._enabled:
            return
        print(f"Request URL: {url}", file=sys.stderr)
        print(f"Request Status: {status_code}", file=sys.stderr)
