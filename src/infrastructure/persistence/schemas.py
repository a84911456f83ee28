"""Pydantic schemas for the persisted task collection."""

from datetime import date
from typing import Annotated
from uuid import UUID

from pydantic import (
    AfterValidator,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    field_validator,
)

from domain.entities.task import Task


class TaskRecord(BaseModel):
    """One stored task.

    Field names follow the stored layout, so ``createdAt`` is camel case
    and the due date is stored under ``date``.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    id: UUID
    text: StrictStr = Field(..., min_length=1)
    completed: StrictBool
    starred: StrictBool
    due_date: date | None = Field(..., alias="date")
    created_at: AwareDatetime = Field(..., alias="createdAt")

    @field_validator("text")
    @classmethod
    def text_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value

    @classmethod
    def from_entity(cls, task: Task) -> "TaskRecord":
        return cls(
            id=task.id,
            text=task.text,
            completed=task.completed,
            starred=task.starred,
            due_date=task.due_date,
            created_at=task.created_at,
        )

    def to_entity(self) -> Task:
        return Task(
            id=self.id,
            text=self.text,
            completed=self.completed,
            starred=self.starred,
            due_date=self.due_date,
            created_at=self.created_at,
        )


def _unique_ids(records: list[TaskRecord]) -> list[TaskRecord]:
    ids = {record.id for record in records}
    if len(ids) != len(records):
        raise ValueError("task ids must be unique")
    return records


TaskRecordList = Annotated[list[TaskRecord], AfterValidator(_unique_ids)]

task_records_adapter: TypeAdapter[list[TaskRecord]] = TypeAdapter(TaskRecordList)
