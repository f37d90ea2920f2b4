"""In-process implementation of ResponseCache."""

from typing import Any


class InMemoryResponseCache:
    """Dictionary-backed response cache.

    Satisfies the ResponseCache protocol through structural typing.
    Entries live until the process exits; concurrent writers to one key
    simply overwrite each other.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
