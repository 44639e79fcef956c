"""Application service (use case) for Task operations."""

from datetime import timezone

from leaseify.application.interfaces import TaskRepository
from leaseify.application.schemas.task import TaskCreate, TaskUpdate
from leaseify.domain.entities import Task
from leaseify.domain.exceptions import EntityNotFoundError, ValidationFailed


class TaskService:
    """Orchestrates task CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: TaskRepository):
        self._repository = repository

    async def get_task(self, task_id: str) -> Task:
        task = await self._repository.get_by_id(task_id)
        if task is None:
            raise EntityNotFoundError("Task", task_id)
        return task

    async def list_tasks(self) -> list[Task]:
        """Open tasks first, each group ordered by due date."""
        tasks = await self._repository.get_all()
        return sorted(tasks, key=lambda t: t.sort_key)

    async def create_task(self, data: TaskCreate) -> Task:
        title = (data.title or "").strip()
        if not title:
            raise ValidationFailed("Title is required", ["title: Title is required"])

        due_date = data.due_date
        if due_date is not None and due_date.tzinfo is None:
            due_date = due_date.replace(tzinfo=timezone.utc)

        return await self._repository.create(Task(title=title, due_date=due_date))

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        task = await self.get_task(task_id)
        task.set_completed(data.is_completed)
        return await self._repository.update(task)

    async def delete_task(self, task_id: str) -> str:
        deleted = await self._repository.delete(task_id)
        if not deleted:
            raise EntityNotFoundError("Task", task_id)
        return task_id
