"""Backend statistics snapshot."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any


class StatsSnapshot(Mapping):
    """Read-only mapping of named counters with defaulted lookups.

    The backend's stats object has no fixed schema. Missing or non-numeric
    counters read as 0 through count(); the raw values stay reachable through
    the mapping interface.
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values = MappingProxyType(dict(values or {}))

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"StatsSnapshot({dict(self._values)!r})"

    def count(self, *names: str) -> int | float:
        """Return the first present numeric counter among names, else 0."""
        for name in names:
            value = self._values.get(name)
            if isinstance(value, bool):
                continue
            if isinstance(value, (int, float)):
                return value
        return 0

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)
