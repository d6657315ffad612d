from __future__ import annotations

from dataclasses import asdict, dataclass
from hashlib import sha1
from typing import Any, Literal

Severity = Literal["low", "medium", "high", "critical"]

# least to most severe
SEVERITIES: tuple[Severity, ...] = ("low", "medium", "high", "critical")


def severity_rank(severity: Severity) -> int:
    return SEVERITIES.index(severity)


@dataclass(frozen=True)
class Finding:
    code: str
    offender: str
    description: str
    mitigation: str

    @property
    def id(self) -> str:
        base = f"{self.code}|{self.offender}|{self.description}|{self.mitigation}"
        return sha1(base.encode("utf-8")).hexdigest()

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["id"] = self.id
        return d


@dataclass
class Summary:
    total: int
    by_severity: dict[str, int]
