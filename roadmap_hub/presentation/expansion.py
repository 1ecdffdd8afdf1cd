from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class ExclusiveExpansion(Generic[K]):
    """At most one open panel; opening one closes the rest."""

    open_key: K | None = None

    def is_open(self, key: K) -> bool:
        return self.open_key is not None and self.open_key == key

    def toggle(self, key: K) -> ExclusiveExpansion[K]:
        if self.is_open(key):
            return ExclusiveExpansion(open_key=None)
        return ExclusiveExpansion(open_key=key)
