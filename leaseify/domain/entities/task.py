"""Domain entity — a landlord's to-do item."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Task:
    """A single task on the landlord dashboard checklist."""

    title: str
    due_date: datetime | None = None
    is_completed: bool = False
    id: str = field(default_factory=lambda: uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def set_completed(self, is_completed: bool) -> None:
        """Flip the completion flag and refresh the updated_at timestamp."""
        self.is_completed = is_completed
        self.updated_at = datetime.now(timezone.utc)

    @property
    def sort_key(self) -> tuple[bool, bool, datetime]:
        """Open tasks first, then by due date; undated tasks sort last."""
        undated = self.due_date is None
        due = self.due_date or datetime.max.replace(tzinfo=timezone.utc)
        return (self.is_completed, undated, due)
