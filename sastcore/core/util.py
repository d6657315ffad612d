from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from sastcore.core.config import settings

logger = logging.getLogger(__name__)


@dataclass
class CmdResult:
    exit_code: int
    stdout: str
    stderr: str


# (error, result): error is set only when the process could not be run at all
CommandCallback = Callable[[str | None, CmdResult], None]


def run_cmd(cmd: Sequence[str], cwd: Path | None = None, timeout_sec: int = 60) -> CmdResult:
    p = subprocess.run(
        list(cmd),
        cwd=str(cwd) if cwd else None,
        capture_output=True,
        text=True,
        timeout=timeout_sec
    )
    return CmdResult(p.returncode, p.stdout or "", p.stderr or "")


class ProcessRunner:
    """Thin process-execution capability injected into every scan module.

    Commands are plain strings so modules can build them deterministically;
    they are split with :func:`shlex.split` and never go through a shell.
    """

    def __init__(self, max_workers: int | None = None, timeout_sec: int | None = None):
        self.timeout_sec = timeout_sec or settings.COMMAND_TIMEOUT_SEC
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers or settings.RUNNER_MAX_WORKERS,
            thread_name_prefix="sastcore-runner",
        )

    def command_exists(self, name: str) -> bool:
        return shutil.which(name) is not None

    def command_path(self, name: str) -> str | None:
        return shutil.which(name)

    def command_sync(self, cmd: str, cwd: Path | None = None) -> CmdResult:
        return run_cmd(shlex.split(cmd), cwd=cwd, timeout_sec=self.timeout_sec)

    def command(self, cmd: str, callback: CommandCallback, cwd: Path | None = None) -> None:
        """Run ``cmd`` on a worker thread and hand the outcome to ``callback``."""
        self._pool.submit(self._execute, cmd, callback, cwd)

    def _execute(self, cmd: str, callback: CommandCallback, cwd: Path | None) -> None:
        logger.debug("Executing: %s", cmd)
        try:
            result = self.command_sync(cmd, cwd=cwd)
        except subprocess.TimeoutExpired as e:
            callback(f"Command timed out after {e.timeout}s", CmdResult(-1, "", ""))
            return
        except (OSError, ValueError) as e:
            callback(str(e), CmdResult(127, "", ""))
            return
        callback(None, result)

    def shutdown(self) -> None:
        self._pool.shutdown(wait=True)
