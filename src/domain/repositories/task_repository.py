"""Task repository protocol."""

from collections.abc import Sequence
from typing import Protocol

from domain.entities.task import Task


class ITaskRepository(Protocol):
    """Repository interface for the persisted task collection.

    The collection is always read and written as a whole.
    """

    def load(self) -> list[Task]:
        """Load every persisted task, or an empty list when nothing usable is stored."""
        ...

    def save(self, tasks: Sequence[Task]) -> bool:
        """Persist the full collection and report whether the write succeeded."""
        ...
