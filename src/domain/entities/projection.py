"""Presentation-ready view of the task list."""

from dataclasses import dataclass, field
from enum import StrEnum

from domain.entities.task import Task


class Bucket(StrEnum):
    """Date groupings, in display order."""

    TODAY = "today"
    TOMORROW = "tomorrow"
    LATER = "later"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class EmptyState(StrEnum):
    """Why a projection has no sections."""

    NO_TASKS = "no_tasks"
    NO_MATCHES = "no_matches"


@dataclass(frozen=True)
class TaskRow:
    """A task as it appears inside a section."""

    task: Task
    date_label: str | None = None
    is_editing: bool = False


@dataclass(frozen=True)
class TaskSection:
    """One non-empty bucket with its rows in display order."""

    bucket: Bucket
    rows: tuple[TaskRow, ...]

    @property
    def label(self) -> str:
        return self.bucket.label

    @property
    def count(self) -> int:
        return len(self.rows)

    @property
    def tasks(self) -> list[Task]:
        return [row.task for row in self.rows]


@dataclass(frozen=True)
class Projection:
    """Result of one render pass over the store."""

    sections: tuple[TaskSection, ...] = field(default_factory=tuple)
    empty: EmptyState | None = None

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def section(self, bucket: Bucket) -> TaskSection | None:
        """Return the section for ``bucket`` if it has any tasks."""
        for section in self.sections:
            if section.bucket is bucket:
                return section
        return None
