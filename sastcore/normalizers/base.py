from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from sastcore.domain.models import Finding


class ReportParseError(ValueError):
    """Raised when a tool report cannot be read as its native format."""


@dataclass(frozen=True)
class LineRange:
    start: int
    end: int

    def render(self) -> str:
        if self.end <= self.start:
            return str(self.start)
        return f"[{self.start}-{self.end}]"


@dataclass
class RawEntry:
    """One tool-reported issue before severity classification."""

    code: str
    priority: str
    description: str
    offender: str
    lines: list[LineRange] = field(default_factory=list)

    def to_finding(self) -> Finding:
        return Finding(
            code=self.code,
            offender=self.offender,
            description=self.description,
            mitigation=render_mitigation(self.lines),
        )


def render_mitigation(lines: Iterable[LineRange]) -> str:
    """``Check line(s) 50, 55`` with ranges deduplicated and sorted by start line."""
    unique = sorted(set(lines), key=lambda r: (r.start, r.end))
    if not unique:
        return "Check line(s) unspecified"
    return "Check line(s) " + ", ".join(r.render() for r in unique)
