from __future__ import annotations

from typing import Iterable

from .base import ScanModule


class ModuleRegistry:
    def __init__(self, modules: Iterable[ScanModule]):
        self._by_key = {m.key: m for m in modules}

    def list(self) -> list[str]:
        return sorted(self._by_key.keys())

    def get(self, key: str) -> ScanModule:
        return self._by_key[key]

    def all(self) -> list[ScanModule]:
        return [self._by_key[k] for k in self.list()]

    def pick(self, selected: list[str] | None) -> list[ScanModule]:
        if not selected:
            return self.all()
        return [self._by_key[k] for k in selected if k in self._by_key]
