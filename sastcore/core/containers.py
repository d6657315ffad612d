from __future__ import annotations

from sastcore.core.util import ProcessRunner
from sastcore.modules.bandit import BanditModule
from sastcore.modules.find_sec_bugs import FindSecBugsModule
from sastcore.modules.registry import ModuleRegistry


def build_module_registry(runner: ProcessRunner | None = None) -> ModuleRegistry:
    """Register all scan modules, sharing one process runner.

    To add a new scanner:
    1. Implement ``ScanModule`` in ``sastcore/modules/``
    2. Add it to the list below
    """
    runner = runner or ProcessRunner()
    return ModuleRegistry(
        [
            FindSecBugsModule(runner),
            BanditModule(runner),
        ]
    )
