from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from sastcore.core.config import settings


class FileManager:
    """View over the project being scanned.

    The only write is ``remove``, used to clear a tool's previous report.
    Paths handed to ``exists``/``read_text`` may be relative to the target
    root or absolute.
    """

    def __init__(self, target: Path | str, exclude_dirs: Iterable[str] | None = None):
        self.target = Path(target).resolve()
        self.exclude_dirs = set(settings.EXCLUDE_DIRS if exclude_dirs is None else exclude_dirs)

    def path(self, rel: str | Path) -> Path:
        p = Path(rel)
        return p if p.is_absolute() else self.target / p

    def exists(self, rel: str | Path) -> bool:
        return self.path(rel).exists()

    def read_text(self, rel: str | Path) -> str:
        return self.path(rel).read_text(encoding="utf-8", errors="replace")

    def remove(self, rel: str | Path) -> None:
        self.path(rel).unlink(missing_ok=True)

    def all(self) -> list[str]:
        """All files under the target as sorted posix paths relative to it."""
        out: list[str] = []
        for dirpath, dirnames, filenames in os.walk(self.target):
            dirnames[:] = [d for d in dirnames if d not in self.exclude_dirs]
            cur = Path(dirpath)
            for name in filenames:
                out.append((cur / name).relative_to(self.target).as_posix())
        return sorted(out)

    def language_files(self, extension: str) -> list[str]:
        suffix = "." + extension.lstrip(".")
        return [f for f in self.all() if f.endswith(suffix)]

    def glob(self, pattern: str) -> list[str]:
        return sorted(
            p.relative_to(self.target).as_posix()
            for p in self.target.glob(pattern)
            if p.is_file()
        )
