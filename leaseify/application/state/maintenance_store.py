"""Store for maintenance requests; newest requests are shown first."""

from collections.abc import Mapping
from typing import Any

from leaseify.application.schemas.records import MaintenanceRequestRecord, MaintenanceStatus
from leaseify.application.services.resource_api import MaintenanceApi
from leaseify.application.state.resource_store import (
    LIST,
    UPDATE,
    OperationResult,
    ResourceStore,
    replace_by_id,
    replace_items,
)


class MaintenanceStore(ResourceStore[MaintenanceRequestRecord]):
    name = "maintenance"
    prepend_created = True

    def __init__(self, api: MaintenanceApi):
        super().__init__(api)
        self._requests = api

    async def fetch_for_tenant(self) -> OperationResult[list[MaintenanceRequestRecord]]:
        return await self._run(LIST, self._requests.list_for_tenant, replace_items)

    async def fetch_for_landlord(self) -> OperationResult[list[MaintenanceRequestRecord]]:
        return await self._run(LIST, self._requests.list_for_landlord, replace_items)

    async def create_request(self, data: Mapping[str, Any]) -> OperationResult[MaintenanceRequestRecord]:
        return await self.create(data)

    async def update_status(
        self, request_id: str, status: MaintenanceStatus | str
    ) -> OperationResult[MaintenanceRequestRecord]:
        value = status.value if isinstance(status, MaintenanceStatus) else status
        return await self._run(
            UPDATE,
            lambda: self._requests.update_status(request_id, value),
            replace_by_id,
            key=request_id,
            supersedes=False,
        )

    async def delete_request(self, request_id: str) -> OperationResult[str]:
        return await self.delete(request_id)
