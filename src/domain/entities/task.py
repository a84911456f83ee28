"""Task domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class Task:
    """Domain entity for a single task in the list."""

    text: str
    id: UUID = field(default_factory=uuid4)
    completed: bool = False
    starred: bool = False
    due_date: date | None = None
    created_at: datetime = field(default_factory=_utcnow)

    def toggle_completed(self) -> None:
        """Flip the completed flag."""
        self.completed = not self.completed

    def toggle_starred(self) -> None:
        """Flip the starred flag."""
        self.starred = not self.starred

    def rename(self, text: str) -> bool:
        """Replace the text with its trimmed form.

        Blank text is rejected and leaves the task untouched.
        """
        cleaned = text.strip()
        if not cleaned:
            return False
        self.text = cleaned
        return True
