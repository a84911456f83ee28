"""User-facing actions for a task list UI."""

from collections.abc import Callable
from datetime import date
from uuid import UUID

import structlog

from domain.entities.projection import Projection
from domain.entities.task import Task
from domain.services.task_store import TaskStore
from domain.services.view_projection import project

logger = structlog.get_logger()

Listener = Callable[[Projection], None]


class TaskListController:
    """Binds UI events to the task store and publishes fresh views.

    Holds the transient UI state (search query and the task in edit
    mode). Every action, including no-ops, ends by calling each
    subscribed listener with a freshly computed projection.
    """

    def __init__(
        self,
        store: TaskStore,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._store = store
        self._today = today
        self._listeners: list[Listener] = []
        self.search_query: str = ""
        self.editing_id: UUID | None = None

    @property
    def store(self) -> TaskStore:
        return self._store

    # -------------------- listeners --------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a render callback. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def view(self) -> Projection:
        """Compute the projection for the current store and UI state."""
        return project(
            self._store.tasks,
            search_query=self.search_query,
            editing_id=self.editing_id,
            today=self._today(),
        )

    def refresh(self) -> Projection:
        """Recompute the view and hand it to every listener."""
        projection = self.view()
        for listener in list(self._listeners):
            listener(projection)
        return projection

    # -------------------- task actions --------------------

    def add(self, text: str, due_date: date | None = None) -> Task | None:
        task = self._store.add(text, due_date)
        self.refresh()
        return task

    def toggle_completed(self, task_id: UUID) -> Task | None:
        task = self._store.toggle_completed(task_id)
        self.refresh()
        return task

    def toggle_starred(self, task_id: UUID) -> Task | None:
        task = self._store.toggle_starred(task_id)
        self.refresh()
        return task

    def remove(self, task_id: UUID) -> bool:
        removed = self._store.remove(task_id)
        if removed and self.editing_id == task_id:
            self.editing_id = None
        self.refresh()
        return removed

    # -------------------- editing --------------------

    def begin_edit(self, task_id: UUID) -> bool:
        """Put a task in edit mode; only one task is edited at a time."""
        if self._store.get(task_id) is None:
            return False
        self.editing_id = task_id
        self.refresh()
        return True

    def commit_edit(self, task_id: UUID, text: str) -> Task | None:
        """Save the edit and leave edit mode.

        Blank text leaves the task unchanged, exactly like cancelling.
        """
        task = self._store.edit(task_id, text)
        self.editing_id = None
        self.refresh()
        return task

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.refresh()

    def handle_key(self, key: str, value: str | None = None) -> bool:
        """Apply the edit shortcuts: Enter commits ``value``, Escape cancels.

        Returns True when the key was consumed.
        """
        if self.editing_id is None:
            return False
        if key == "Enter":
            self.commit_edit(self.editing_id, value or "")
            return True
        if key == "Escape":
            self.cancel_edit()
            return True
        return False

    # -------------------- search --------------------

    def set_search_query(self, text: str) -> Projection:
        self.search_query = text.strip()
        logger.debug("search_query_changed", has_query=bool(self.search_query))
        return self.refresh()
