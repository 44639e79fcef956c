"""Abstract repository interface (port) for Task persistence."""

from abc import ABC, abstractmethod

from leaseify.domain.entities import Task


class TaskRepository(ABC):
    """Port for task persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Task | None:
        """Retrieve a single task by its id."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Task]:
        """Retrieve every task."""
        ...

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Persist a new task and return it."""
        ...

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update an existing task."""
        ...

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        """Delete a task. Returns True if deleted, False if not found."""
        ...
