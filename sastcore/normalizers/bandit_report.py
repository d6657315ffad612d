from __future__ import annotations

import json
from pathlib import Path

from .base import LineRange, RawEntry, ReportParseError


def parse_report(json_text: str, target: Path) -> list[RawEntry]:
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise ReportParseError(f"malformed JSON: {e}") from e

    if not isinstance(data, dict):
        raise ReportParseError("expected a JSON object at the top level")

    out: list[RawEntry] = []
    for r in data.get("results") or []:
        rel = to_target_relative(target, str(r.get("filename") or ""))
        out.append(
            RawEntry(
                code=str(r.get("test_id") or r.get("test_name") or ""),
                priority=str(r.get("issue_severity") or ""),
                description=r.get("issue_text") or "Bandit finding",
                offender=f"In file {rel}",
                lines=_lines(r),
            )
        )
    return out


def _lines(r: dict) -> list[LineRange]:
    # line_range lists every physical line of a multi-line statement
    line_range = [int(n) for n in r.get("line_range") or [] if str(n).isdigit()]
    if line_range:
        return [LineRange(min(line_range), max(line_range))]
    line = r.get("line_number")
    return [LineRange(int(line), int(line))] if line else []


def to_target_relative(target: Path, filename: str) -> str:
    """
    Convert a bandit filename to a path relative to the scanned target.
    Handles absolute paths, './x.py', and already-relative paths.
    """
    if not filename:
        return ""

    s = filename.replace("\\", "/")
    if s.startswith("./"):
        s = s[2:]

    p = Path(s)
    if p.is_absolute():
        try:
            return p.resolve().relative_to(target.resolve()).as_posix()
        except ValueError:
            # absolute but outside the target
            return p.as_posix()

    return p.as_posix()
