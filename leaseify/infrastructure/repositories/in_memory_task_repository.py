"""In-memory implementation of the TaskRepository port.

The document database is an external collaborator; this adapter keeps the
task endpoints usable in development and in tests.
"""

import asyncio
from dataclasses import replace

from leaseify.application.interfaces import TaskRepository
from leaseify.domain.entities import Task


class InMemoryTaskRepository(TaskRepository):
    """Stores copies so callers never share mutable entities with the store."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = asyncio.Lock()

    async def get_by_id(self, task_id: str) -> Task | None:
        task = self._tasks.get(task_id)
        return replace(task) if task is not None else None

    async def get_all(self) -> list[Task]:
        return [replace(t) for t in self._tasks.values()]

    async def create(self, task: Task) -> Task:
        async with self._lock:
            self._tasks[task.id] = replace(task)
        return task

    async def update(self, task: Task) -> Task:
        async with self._lock:
            if task.id not in self._tasks:
                raise KeyError(task.id)
            self._tasks[task.id] = replace(task)
        return task

    async def delete(self, task_id: str) -> bool:
        async with self._lock:
            return self._tasks.pop(task_id, None) is not None
