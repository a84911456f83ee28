"""Storage-slot implementation of the task repository."""

from collections.abc import Sequence

import structlog
from pydantic import ValidationError

from core.exceptions import CorruptTaskDataError, StorageError
from domain.entities.task import Task
from domain.repositories.storage_slot import IStorageSlot
from infrastructure.persistence.schemas import TaskRecord, task_records_adapter

logger = structlog.get_logger()

DEFAULT_KEY = "tasks"


def encode_tasks(tasks: Sequence[Task]) -> str:
    """Serialize the collection as a bare JSON array of task records."""
    records = [TaskRecord.from_entity(task) for task in tasks]
    return task_records_adapter.dump_json(records, by_alias=True).decode("utf-8")


def decode_tasks(raw: str) -> list[Task]:
    """Parse and validate a stored collection.

    Raises ``CorruptTaskDataError`` on malformed JSON or any record that
    does not match ``TaskRecord``.
    """
    try:
        records = task_records_adapter.validate_json(raw)
    except ValidationError as e:
        raise CorruptTaskDataError(f"{e.error_count()} validation error(s)") from e
    return [record.to_entity() for record in records]


class SlotTaskRepository:
    """ITaskRepository that keeps the whole collection under one slot key."""

    def __init__(self, slot: IStorageSlot, key: str = DEFAULT_KEY) -> None:
        self._slot = slot
        self._key = key

    def load(self) -> list[Task]:
        """Load the collection; anything unusable yields an empty list."""
        try:
            raw = self._slot.read(self._key)
        except StorageError as e:
            logger.error("tasks_load_failed", key=self._key, error_code=e.error_code.value)
            return []

        if raw is None:
            logger.info("tasks_not_found", key=self._key)
            return []

        try:
            tasks = decode_tasks(raw)
        except CorruptTaskDataError as e:
            logger.warning(
                "tasks_corrupt",
                key=self._key,
                error_code=e.error_code.value,
                details=e.details,
            )
            return []

        logger.info("tasks_loaded", key=self._key, task_count=len(tasks))
        return tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        """Write the full collection; failures are logged and reported as False."""
        payload = encode_tasks(tasks)
        try:
            self._slot.write(self._key, payload)
        except StorageError as e:
            logger.error("tasks_save_failed", key=self._key, error_code=e.error_code.value)
            return False

        logger.debug("tasks_saved", key=self._key, task_count=len(tasks))
        return True
