"""Store for the landlord's dashboard task list."""

from collections.abc import Mapping
from typing import Any

from leaseify.application.schemas.records import TaskRecord
from leaseify.application.services.resource_api import TaskApi
from leaseify.application.state.resource_store import OperationResult, ResourceStore


class TaskStore(ResourceStore[TaskRecord]):
    name = "tasks"

    def __init__(self, api: TaskApi):
        super().__init__(api)

    async def fetch_tasks(self) -> OperationResult[list[TaskRecord]]:
        return await self.fetch_all()

    async def create_task(self, data: Mapping[str, Any]) -> OperationResult[TaskRecord]:
        return await self.create(data)

    async def toggle_task(self, task_id: str, is_completed: bool) -> OperationResult[TaskRecord]:
        return await self.update(task_id, {"isCompleted": is_completed})

    async def delete_task(self, task_id: str) -> OperationResult[str]:
        return await self.delete(task_id)
