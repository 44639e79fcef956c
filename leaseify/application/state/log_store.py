"""Store for the landlord's communication log."""

from collections.abc import Mapping
from typing import Any

from leaseify.application.schemas.records import LogEntryRecord
from leaseify.application.services.resource_api import LogApi
from leaseify.application.state.resource_store import OperationResult, ResourceStore


class LogStore(ResourceStore[LogEntryRecord]):
    name = "logs"

    def __init__(self, api: LogApi):
        super().__init__(api)

    async def fetch_logs(self) -> OperationResult[list[LogEntryRecord]]:
        return await self.fetch_all()

    async def create_log(self, data: Mapping[str, Any]) -> OperationResult[LogEntryRecord]:
        return await self.create(data)
