from __future__ import annotations

import logging
import shlex
from functools import partial

from sastcore.core.file_manager import FileManager
from sastcore.core.util import CmdResult, ProcessRunner
from sastcore.domain.results import ResultSink
from sastcore.normalizers.bandit_report import parse_report
from sastcore.normalizers.severity import classify_bandit

from .base import Done, ModuleInfo, ScanModule, record_report, spawn, warn_tool_missing


class BanditModule(ScanModule):
    info = ModuleInfo(
        key="bandit",
        name="Bandit",
        binary="bandit",
        ecosystem="python",
        extension="py",
        report_file="banditReport.json",
        install_url="https://bandit.readthedocs.io/en/latest/start.html",
        description="Scans Python code for common security issues with bandit",
    )

    def __init__(self, runner: ProcessRunner | None = None, logger: logging.Logger | None = None):
        self.runner = runner or ProcessRunner()
        self.logger = logger or logging.getLogger(__name__)

    def handles(self, fm: FileManager) -> bool:
        if not fm.language_files(self.info.extension):
            return False

        if not self.runner.command_exists(self.info.binary):
            warn_tool_missing(self.logger, self.info)
            return False

        return True

    def build_command(self, fm: FileManager) -> str:
        report = shlex.quote(f"{fm.target}/{self.info.report_file}")
        # bandit exits 1 whenever it finds something; only the report matters
        return f"{self.info.binary} -r {shlex.quote(str(fm.target))} -f json -o {report}"

    def run(self, fm: FileManager, results: ResultSink, done: Done) -> None:
        def on_complete(error: str | None, result: CmdResult) -> None:
            try:
                record_report(
                    info=self.info,
                    fm=fm,
                    error=error,
                    result=result,
                    parse=partial(parse_report, target=fm.target),
                    classify=classify_bandit,
                    results=results,
                    logger=self.logger,
                )
            except Exception:
                self.logger.exception(f"Unexpected failure while processing the {self.info.name} report")
            finally:
                done()

        spawn(
            info=self.info,
            fm=fm,
            runner=self.runner,
            cmd=self.build_command(fm),
            on_complete=on_complete,
            done=done,
            logger=self.logger,
        )
