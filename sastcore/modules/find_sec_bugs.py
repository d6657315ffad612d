from __future__ import annotations

import logging
import shlex
from pathlib import Path

from sastcore.core.file_manager import FileManager
from sastcore.core.util import CmdResult, ProcessRunner
from sastcore.domain.results import ResultSink
from sastcore.normalizers.find_sec_bugs_report import parse_report
from sastcore.normalizers.severity import classify_find_sec_bugs

from .base import Done, ModuleInfo, ScanModule, record_report, spawn, warn_tool_missing

# Maven output first, then Gradle
ARTIFACT_GLOBS = ("target/*.jar", "build/libs/*.jar")
_IGNORED_JAR_SUFFIXES = ("-sources.jar", "-javadoc.jar", "-tests.jar")

FLAGS = ("-nested:false", "-progress", "-effort:max", "-exitcode", "-xml:withMessages")


class FindSecBugsModule(ScanModule):
    info = ModuleInfo(
        key="findSecBugs",
        name="FindSecBugs",
        binary="findsecbugs",
        ecosystem="java",
        extension="java",
        report_file="findSecBugsReport.xml",
        install_url="https://github.com/Stono/hawkeye/blob/master/lib/modules/findsecbugs/README.md",
        description="Finds common security issues in Java code with findsecbugs",
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

        if find_artifact(fm) is None:
            self.logger.warning(f"{self.info.ecosystem} files were found but no jar files")
            self.logger.warning(
                f"{self.info.key} scan will not run unless you build the project before"
            )
            return False

        return True

    def build_command(self, fm: FileManager, artifact: str) -> str:
        report = f"{fm.target}/{self.info.report_file}"
        jar = f"{fm.target}/{artifact}"
        return " ".join(
            [self.info.binary, *FLAGS, "-output", shlex.quote(report), shlex.quote(jar)]
        )

    def run(self, fm: FileManager, results: ResultSink, done: Done) -> None:
        artifact = find_artifact(fm)
        if artifact is None:
            self.logger.error(f"{self.info.name} has no jar to scan in {fm.target}")
            done()
            return

        # findsecbugs resolves its plugins relative to its install directory
        binary_path = self.runner.command_path(self.info.binary)
        cwd = Path(binary_path).resolve().parent if binary_path else None

        def on_complete(error: str | None, result: CmdResult) -> None:
            try:
                record_report(
                    info=self.info,
                    fm=fm,
                    error=error,
                    result=result,
                    parse=parse_report,
                    classify=classify_find_sec_bugs,
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
            cmd=self.build_command(fm, artifact),
            on_complete=on_complete,
            done=done,
            logger=self.logger,
            cwd=cwd,
        )


def find_artifact(fm: FileManager) -> str | None:
    for pattern in ARTIFACT_GLOBS:
        jars = [j for j in fm.glob(pattern) if not j.endswith(_IGNORED_JAR_SUFFIXES)]
        if jars:
            return jars[0]
    return None
