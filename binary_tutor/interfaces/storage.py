"""Protocol for the key-value persistence boundary."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for a string key-value store.

    The history ledger and the theme preference only need these three
    operations, so any backend (a JSON file, an in-memory dict, Qt
    settings, ...) can be plugged in.
    """

    def get(self, key: str) -> str | None:
        """Return the stored text for ``key``, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``.

        Raises:
            StorageError: If the value cannot be persisted.
        """
        ...

    def remove(self, key: str) -> None:
        """Delete ``key`` if present."""
        ...
