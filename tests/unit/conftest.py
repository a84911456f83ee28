"""Shared fixtures for unit tests."""

from collections.abc import Sequence

import pytest

from domain.entities.task import Task


class FakeTaskRepository:
    """Fake task repository that records every save."""

    def __init__(self, initial: Sequence[Task] = ()) -> None:
        self.initial = list(initial)
        self.saves: list[list[Task]] = []
        self.fail_writes = False

    def load(self) -> list[Task]:
        return list(self.initial)

    def save(self, tasks: Sequence[Task]) -> bool:
        if self.fail_writes:
            return False
        self.saves.append(list(tasks))
        return True

    @property
    def save_count(self) -> int:
        return len(self.saves)


@pytest.fixture
def fake_repo() -> FakeTaskRepository:
    """Create a fresh FakeTaskRepository."""
    return FakeTaskRepository()
