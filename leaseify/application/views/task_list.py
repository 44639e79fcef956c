"""Dashboard task checklist."""

import logging
from collections.abc import Mapping
from typing import Any

from leaseify.application.schemas.records import TaskRecord
from leaseify.application.state.resource_store import OperationResult
from leaseify.application.state.task_store import TaskStore
from leaseify.application.validation import validate_task
from leaseify.application.views.base import ChangeCallback, ResourceView, SubmitOutcome

logger = logging.getLogger(__name__)


class TaskListView(ResourceView[list[TaskRecord]]):
    def __init__(self, store: TaskStore, on_change: ChangeCallback | None = None):
        super().__init__(store, load=lambda _: store.fetch_tasks(), on_change=on_change)
        self._tasks = store

    async def add_task(self, form: Mapping[str, Any]) -> SubmitOutcome[TaskRecord]:
        validation = validate_task(form)
        if not validation.is_valid:
            return SubmitOutcome(validation)
        data = {**form, "title": str(form["title"]).strip()}
        return SubmitOutcome(validation, await self._tasks.create_task(data))

    async def toggle(self, task_id: str) -> OperationResult[TaskRecord] | None:
        task = self._tasks.state.find(task_id)
        if task is None:
            logger.warning("Toggle requested for unknown task %s", task_id)
            return None
        return await self._tasks.toggle_task(task_id, not task.is_completed)

    async def remove(self, task_id: str) -> OperationResult[str]:
        return await self._tasks.delete_task(task_id)
