"""Pytest configuration and fixtures."""

import sys
from collections.abc import Callable, Generator
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.task import Task
from domain.services.task_store import TaskStore
from infrastructure.persistence.slot_task_repo import SlotTaskRepository
from infrastructure.storage.memory_slot import InMemorySlot
from infrastructure.storage.session import create_session_factory, create_storage_engine
from presentation.controller import TaskListController

# Fixed evaluation day so bucketing does not depend on the wall clock
TODAY = date(2026, 10, 19)
TOMORROW = TODAY + timedelta(days=1)

# In-memory SQLite shared across sessions via StaticPool
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Build tasks with strictly increasing creation times."""
    base = datetime(2026, 10, 1, 9, 0, tzinfo=UTC)
    counter = {"n": 0}

    def factory(text: str = "Task", **kwargs: object) -> Task:
        counter["n"] += 1
        kwargs.setdefault("created_at", base + timedelta(minutes=counter["n"]))
        return Task(text=text, **kwargs)  # type: ignore[arg-type]

    return factory


@pytest.fixture
def slot() -> InMemorySlot:
    return InMemorySlot()


@pytest.fixture
def repository(slot: InMemorySlot) -> SlotTaskRepository:
    return SlotTaskRepository(slot)


@pytest.fixture
def store(repository: SlotTaskRepository) -> TaskStore:
    return TaskStore.open(repository)


@pytest.fixture
def controller(store: TaskStore) -> TaskListController:
    return TaskListController(store, today=lambda: TODAY)


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create test database engine with the slot table."""
    engine = create_storage_engine(TEST_DATABASE_URL)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(engine)
