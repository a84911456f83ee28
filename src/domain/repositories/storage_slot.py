"""Storage slot protocol."""

from typing import Protocol


class IStorageSlot(Protocol):
    """Durable string-keyed storage.

    Implementations raise ``StorageError`` when the backing store fails.
    """

    def read(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def write(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key``; absent keys are ignored."""
        ...
