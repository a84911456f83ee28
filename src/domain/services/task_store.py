"""Task store: the in-memory task collection and its mutations."""

from collections.abc import Iterable
from datetime import date
from uuid import UUID

import structlog

from domain.entities.task import Task
from domain.repositories.task_repository import ITaskRepository

logger = structlog.get_logger()


class TaskStore:
    """Ordered task collection that persists itself after every mutation.

    Raw order is newest first. It carries no meaning for presentation;
    use ``domain.services.view_projection.project`` for display order.
    Validation rejections and unknown ids are silent no-ops and do not
    touch the repository.
    """

    def __init__(self, repository: ITaskRepository, tasks: Iterable[Task] = ()) -> None:
        self._repository = repository
        self._tasks: list[Task] = list(tasks)

    @classmethod
    def open(cls, repository: ITaskRepository) -> "TaskStore":
        """Create a store seeded from whatever the repository holds."""
        tasks = repository.load()
        logger.info("task_store_opened", task_count=len(tasks))
        return cls(repository, tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the raw collection."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: UUID) -> Task | None:
        """Find a task by id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, text: str, due_date: date | None = None) -> Task | None:
        """Create a task at the front of the collection."""
        cleaned = text.strip()
        if not cleaned:
            logger.debug("task_add_ignored", reason="empty_text")
            return None

        task = Task(text=cleaned, due_date=due_date)
        self._tasks.insert(0, task)
        self._persist()
        logger.info("task_added", task_id=str(task.id), due_date=str(due_date) if due_date else None)
        return task

    def toggle_completed(self, task_id: UUID) -> Task | None:
        """Flip a task's completed flag."""
        task = self.get(task_id)
        if task is None:
            return None
        task.toggle_completed()
        self._persist()
        logger.info("task_completed_toggled", task_id=str(task_id), completed=task.completed)
        return task

    def toggle_starred(self, task_id: UUID) -> Task | None:
        """Flip a task's starred flag."""
        task = self.get(task_id)
        if task is None:
            return None
        task.toggle_starred()
        self._persist()
        logger.info("task_starred_toggled", task_id=str(task_id), starred=task.starred)
        return task

    def edit(self, task_id: UUID, new_text: str) -> Task | None:
        """Replace a task's text.

        Blank text discards the edit and returns None.
        """
        task = self.get(task_id)
        if task is None:
            return None
        if not task.rename(new_text):
            logger.debug("task_edit_discarded", task_id=str(task_id), reason="empty_text")
            return None
        self._persist()
        logger.info("task_edited", task_id=str(task_id))
        return task

    def remove(self, task_id: UUID) -> bool:
        """Delete a task. Returns False if the id is unknown."""
        task = self.get(task_id)
        if task is None:
            return False
        self._tasks = [t for t in self._tasks if t.id != task_id]
        self._persist()
        logger.info("task_removed", task_id=str(task_id))
        return True

    def _persist(self) -> None:
        # The in-memory collection stays authoritative when the write fails.
        if not self._repository.save(self._tasks):
            logger.warning("task_store_not_persisted", task_count=len(self._tasks))
