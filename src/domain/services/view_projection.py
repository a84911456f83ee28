"""Filtering, ordering and date grouping of tasks for display."""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from uuid import UUID

from domain.entities.projection import Bucket, EmptyState, Projection, TaskRow, TaskSection
from domain.entities.task import Task


def filter_tasks(tasks: Iterable[Task], query: str) -> list[Task]:
    """Keep tasks whose text contains ``query``, ignoring case.

    A blank query keeps everything.
    """
    needle = query.strip().casefold()
    if not needle:
        return list(tasks)
    return [task for task in tasks if needle in task.text.casefold()]


def sort_key(task: Task) -> tuple[bool, bool, date, float]:
    """Starred first, then dated before dateless by ascending date, then newest first."""
    return (
        not task.starred,
        task.due_date is None,
        task.due_date or date.min,
        -task.created_at.timestamp(),
    )


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    # sorted() is stable, so full ties keep their input order
    return sorted(tasks, key=sort_key)


def bucket_for(task: Task, today: date) -> Bucket:
    """Place a task in Today, Tomorrow or Later relative to ``today``."""
    if task.due_date is None:
        return Bucket.LATER
    if task.due_date == today:
        return Bucket.TODAY
    if task.due_date == today + timedelta(days=1):
        return Bucket.TOMORROW
    return Bucket.LATER


def format_date_label(value: date, today: date | None = None) -> str:
    """Render a due date as "Today", "Tomorrow", "Mar 5" or "Mar 5, 2027"."""
    today = today or date.today()
    if value == today:
        return "Today"
    if value == today + timedelta(days=1):
        return "Tomorrow"

    label = f"{value:%b} {value.day}"
    if value.year != today.year:
        label = f"{label}, {value.year}"
    return label


def project(
    tasks: Sequence[Task],
    search_query: str = "",
    editing_id: UUID | None = None,
    today: date | None = None,
) -> Projection:
    """Build the grouped, ordered view of ``tasks``.

    ``today`` defaults to the local date at call time, so bucketing is
    recomputed on every pass rather than fixed when a task is created.
    """
    today = today or date.today()
    matching = sort_tasks(filter_tasks(tasks, search_query))

    grouped: dict[Bucket, list[TaskRow]] = {bucket: [] for bucket in Bucket}
    for task in matching:
        row = TaskRow(
            task=task,
            date_label=format_date_label(task.due_date, today) if task.due_date else None,
            is_editing=editing_id is not None and task.id == editing_id,
        )
        grouped[bucket_for(task, today)].append(row)

    sections = tuple(
        TaskSection(bucket=bucket, rows=tuple(rows)) for bucket, rows in grouped.items() if rows
    )
    if sections:
        return Projection(sections=sections)

    empty = EmptyState.NO_TASKS if not tasks else EmptyState.NO_MATCHES
    return Projection(empty=empty)
