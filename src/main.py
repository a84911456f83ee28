"""Application composition root."""

import structlog
from sqlalchemy.exc import SQLAlchemyError

from core.config import Settings, get_settings
from core.logging import setup_logging
from domain.repositories.storage_slot import IStorageSlot
from domain.services.task_store import TaskStore
from infrastructure.persistence.slot_task_repo import SlotTaskRepository
from infrastructure.storage.memory_slot import InMemorySlot
from infrastructure.storage.session import create_session_factory, create_storage_engine
from infrastructure.storage.sqlalchemy_slot import SQLAlchemySlot
from presentation.controller import TaskListController

logger = structlog.get_logger()


def create_slot(settings: Settings) -> IStorageSlot:
    """Build the configured storage slot.

    An unusable database falls back to in-memory storage so the session
    still works without durable state.
    """
    if settings.storage_backend == "memory":
        return InMemorySlot()

    try:
        engine = create_storage_engine(settings.storage_url, echo=settings.debug)
    except SQLAlchemyError as e:
        logger.error("storage_unavailable", backend=settings.storage_backend, error=str(e))
        return InMemorySlot()
    return SQLAlchemySlot(create_session_factory(engine))


def create_app(settings: Settings | None = None) -> TaskListController:
    """Create and wire the task list application."""
    settings = settings or get_settings()
    setup_logging(settings)

    repository = SlotTaskRepository(create_slot(settings), key=settings.storage_key)
    store = TaskStore.open(repository)
    controller = TaskListController(store)

    logger.info(
        "app_started",
        app_name=settings.app_name,
        app_env=settings.app_env,
        storage_backend=settings.storage_backend,
        task_count=len(store),
    )
    return controller
