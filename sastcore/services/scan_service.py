from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path

from sastcore.core.config import settings
from sastcore.core.file_manager import FileManager
from sastcore.domain.results import Results
from sastcore.modules.registry import ModuleRegistry

logger = logging.getLogger(__name__)


@dataclass
class ScanOutcome:
    target: Path
    results: Results
    ran: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    unfinished: list[str] = field(default_factory=list)


class ScanService:
    """
    Runs every applicable module against one target and waits for all of them.
    """

    def __init__(self, registry: ModuleRegistry, timeout_sec: int | None = None):
        self.modules = registry
        self.timeout_sec = timeout_sec or settings.SCAN_TIMEOUT_SEC

    def scan(self, target: Path | str, selected: list[str] | None = None) -> ScanOutcome:
        fm = FileManager(target)
        if not fm.target.is_dir():
            raise FileNotFoundError(f"Target does not exist: {fm.target}")

        outcome = ScanOutcome(target=fm.target, results=Results())
        pending: dict[str, threading.Event] = {}

        for module in self.modules.pick(selected):
            if not module.handles(fm):
                outcome.skipped.append(module.key)
                continue

            logger.info("Running %s ...", module.key, extra={"module_key": module.key})
            finished = threading.Event()
            pending[module.key] = finished
            outcome.ran.append(module.key)
            module.run(fm, outcome.results, finished.set)

        deadline = time.monotonic() + self.timeout_sec
        for key, finished in pending.items():
            if not finished.wait(max(0.0, deadline - time.monotonic())):
                logger.error("%s did not finish within %ss", key, self.timeout_sec)
                outcome.unfinished.append(key)

        logger.info(
            "Scan of %s complete: %d findings",
            fm.target,
            outcome.results.summary().total,
        )
        return outcome
