import shlex
import shutil
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from sastcore.core.util import CmdResult
from sastcore.main import app

SAMPLES = Path(__file__).parent / "samples"
SAMPLE_REPORT = SAMPLES / "findSecBugsReport.xml"


class FakeRunner:
    """Process runner double: records commands and completes synchronously.

    With ``report`` set, that file is copied to the command's output path
    before the callback runs, like the real tool writing its report.
    """

    def __init__(
        self,
        exists: bool = True,
        error: str | None = None,
        result: CmdResult | None = None,
        path: str = "/usr/bin/findsecbugs",
        report: Path | None = None,
    ):
        self.exists = exists
        self.error = error
        self.result = result or CmdResult(0, "", "")
        self.path = path
        self.report = report
        self.commands: list[str] = []
        self.cwds: list[Path | None] = []

    def command_exists(self, name: str) -> bool:
        return self.exists

    def command_path(self, name: str) -> str | None:
        return self.path if self.exists else None

    def command(self, cmd, callback, cwd=None):
        self.commands.append(cmd)
        self.cwds.append(cwd)
        if self.report:
            shutil.copy(self.report, _output_path(cmd))
        callback(self.error, self.result)


def _output_path(cmd: str) -> str:
    argv = shlex.split(cmd)
    for flag in ("-output", "-o"):
        if flag in argv:
            return argv[argv.index(flag) + 1]
    raise AssertionError(f"no output path in {cmd!r}")


class RecordingSink:
    """Sink exposing only the four per-severity recorders."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []

    def low(self, finding):
        self.calls.append(("low", finding))

    def medium(self, finding):
        self.calls.append(("medium", finding))

    def high(self, finding):
        self.calls.append(("high", finding))

    def critical(self, finding):
        self.calls.append(("critical", finding))

    def called_with(self, severity):
        return [f for s, f in self.calls if s == severity]


def _java_sources(root: Path) -> None:
    src = root / "src/main/java/com/hawkeye/java"
    src.mkdir(parents=True)
    (src / "Application.java").write_text("public class Application {}\n", encoding="utf-8")


@pytest.fixture
def maven_project(tmp_path) -> Path:
    root = tmp_path / "maven"
    _java_sources(root)
    (root / "pom.xml").write_text("<project/>\n", encoding="utf-8")
    (root / "target").mkdir()
    (root / "target/main.jar").write_bytes(b"PK\x03\x04")
    return root


@pytest.fixture
def gradle_project(tmp_path) -> Path:
    root = tmp_path / "gradle"
    _java_sources(root)
    (root / "build.gradle").write_text("apply plugin: 'java'\n", encoding="utf-8")
    (root / "build/libs").mkdir(parents=True)
    (root / "build/libs/app-1.0-sources.jar").write_bytes(b"PK\x03\x04")
    (root / "build/libs/app-1.0.jar").write_bytes(b"PK\x03\x04")
    return root


@pytest.fixture
def unbuilt_project(tmp_path) -> Path:
    root = tmp_path / "mvn-with-no-jar"
    _java_sources(root)
    (root / "pom.xml").write_text("<project/>\n", encoding="utf-8")
    return root


@pytest.fixture
def client():
    return TestClient(app)
