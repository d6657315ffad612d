from __future__ import annotations

import threading
from typing import Any, Protocol

from sastcore.domain.models import SEVERITIES, Finding, Severity, Summary


class ResultSink(Protocol):
    """What a scan module needs from a sink: one recorder per severity."""

    def low(self, finding: Finding) -> None: ...

    def medium(self, finding: Finding) -> None: ...

    def high(self, finding: Finding) -> None: ...

    def critical(self, finding: Finding) -> None: ...


class Results:
    """Append-only sink shared by every module of a scan.

    Modules record from runner threads, so each append goes through a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._buckets: dict[Severity, list[Finding]] = {s: [] for s in SEVERITIES}

    def record(self, severity: Severity, finding: Finding) -> None:
        if severity not in self._buckets:
            raise ValueError(f"Unknown severity: {severity!r}")
        with self._lock:
            self._buckets[severity].append(finding)

    def low(self, finding: Finding) -> None:
        self.record("low", finding)

    def medium(self, finding: Finding) -> None:
        self.record("medium", finding)

    def high(self, finding: Finding) -> None:
        self.record("high", finding)

    def critical(self, finding: Finding) -> None:
        self.record("critical", finding)

    def findings(self, severity: Severity) -> list[Finding]:
        with self._lock:
            return list(self._buckets[severity])

    def summary(self) -> Summary:
        with self._lock:
            by_sev = {s: len(self._buckets[s]) for s in SEVERITIES}
        return Summary(total=sum(by_sev.values()), by_severity=by_sev)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {s: [f.to_dict() for f in self.findings(s)] for s in SEVERITIES}
