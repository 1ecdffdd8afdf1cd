from __future__ import annotations

from roadmap_hub.preferences import PreferenceStorageError
from roadmap_hub.theme import Mode, Theme


class MemoryStorage:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []

    async def read(self, key: str) -> str | None:
        return self.values.get(key)

    async def write(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes.append((key, value))


class FailingStorage:
    def __init__(self, *, fail_reads: bool = True, fail_writes: bool = True) -> None:
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.read_calls = 0
        self.write_calls = 0

    async def read(self, key: str) -> str | None:
        self.read_calls += 1
        if self.fail_reads:
            raise PreferenceStorageError("storage unavailable")
        return None

    async def write(self, key: str, value: str) -> None:
        self.write_calls += 1
        if self.fail_writes:
            raise PreferenceStorageError("quota exceeded")


class RecordingEffects:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self._variables: dict[str, str] = {}

    @property
    def variables(self) -> dict[str, str]:
        return dict(self._variables)

    def apply_palette(self, theme: Theme) -> None:
        self.calls.append(("palette", theme.id))
        self._variables = dict(theme.colors)

    def apply_mode(self, mode: Mode) -> None:
        self.calls.append(("mode", mode.value))
