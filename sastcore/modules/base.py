from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from sastcore.core.file_manager import FileManager
from sastcore.core.util import CmdResult, CommandCallback, ProcessRunner
from sastcore.domain.models import Severity
from sastcore.domain.results import ResultSink
from sastcore.normalizers.base import RawEntry, ReportParseError

Done = Callable[[], None]


@dataclass(frozen=True)
class ModuleInfo:
    """Static description of one scanner integration."""

    key: str  # used in applicability warnings, e.g. "findSecBugs"
    name: str  # used in run diagnostics, e.g. "FindSecBugs"
    binary: str
    ecosystem: str
    extension: str
    report_file: str
    install_url: str
    description: str = ""


class ScanModule(ABC):
    info: ModuleInfo

    @property
    def key(self) -> str:
        return self.info.key

    @abstractmethod
    def handles(self, fm: FileManager) -> bool: ...

    @abstractmethod
    def run(self, fm: FileManager, results: ResultSink, done: Done) -> None: ...


def warn_tool_missing(logger: logging.Logger, info: ModuleInfo) -> None:
    logger.warning(f"{info.ecosystem} files found but {info.key} was not found in $PATH")
    logger.warning(f"{info.key} scan will not run unless you install {info.key} CLI")
    logger.warning(f"Installation instructions: {info.install_url}")


def spawn(
    *,
    info: ModuleInfo,
    fm: FileManager,
    runner: ProcessRunner,
    cmd: str,
    on_complete: CommandCallback,
    done: Done,
    logger: logging.Logger,
    cwd: Path | None = None,
) -> None:
    """Start the tool after clearing the previous run's report."""
    try:
        fm.remove(info.report_file)
        runner.command(cmd, on_complete, cwd=cwd)
    except Exception:
        logger.exception(f"Could not start {info.name}")
        done()


def record_report(
    *,
    info: ModuleInfo,
    fm: FileManager,
    error: str | None,
    result: CmdResult,
    parse: Callable[[str], list[RawEntry]],
    classify: Callable[[str], Severity],
    results: ResultSink,
    logger: logging.Logger,
) -> int:
    """Turn a finished tool run into recorded findings; returns how many were recorded.

    A tool may fail late and still flush its report, so the report's presence
    decides whether anything is parsed, not the exit status.
    """
    diagnostics = [d for d in (error, (result.stderr or "").strip()) if d]

    if not fm.exists(info.report_file):
        logger.error(
            f"There was an error while executing {info.name} and the report was not created: "
            f'"{"; ".join(diagnostics)}"'
        )
        return 0

    for diagnostic in diagnostics:
        logger.warning(f"There was an error while executing {info.name}: {diagnostic}")

    try:
        entries = parse(fm.read_text(info.report_file))
    except (ReportParseError, OSError) as e:
        logger.error(f"There was an error while parsing the {info.name} report: {e}")
        return 0

    for entry in entries:
        recorder = getattr(results, classify(entry.priority))
        recorder(entry.to_finding())

    logger.info(
        "%s recorded %d findings", info.name, len(entries), extra={"module_key": info.key}
    )
    return len(entries)
