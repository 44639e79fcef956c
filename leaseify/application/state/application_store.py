"""Store for rental applications awaiting a landlord decision."""

from collections.abc import Mapping
from typing import Any

from leaseify.application.schemas.records import ApplicationRecord, ApplicationStatus
from leaseify.application.services.resource_api import ApplicationApi
from leaseify.application.state.resource_store import (
    UPDATE,
    OperationResult,
    ResourceState,
    ResourceStore,
    remove_by_id,
    replace_by_id,
)


def _apply_decision(
    state: ResourceState[ApplicationRecord], record: ApplicationRecord
) -> ResourceState[ApplicationRecord]:
    # the landlord list only holds undecided applications
    if record.status == ApplicationStatus.PENDING:
        return replace_by_id(state, record)
    return remove_by_id(state, record.id)


class ApplicationStore(ResourceStore[ApplicationRecord]):
    name = "applications"

    def __init__(self, api: ApplicationApi):
        super().__init__(api)
        self._applications = api

    async def fetch_applications(self) -> OperationResult[list[ApplicationRecord]]:
        return await self.fetch_all()

    async def create_application(self, data: Mapping[str, Any]) -> OperationResult[ApplicationRecord]:
        return await self.create(data)

    async def update_status(
        self, application_id: str, status: ApplicationStatus | str
    ) -> OperationResult[ApplicationRecord]:
        value = status.value if isinstance(status, ApplicationStatus) else status
        return await self._run(
            UPDATE,
            lambda: self._applications.update_status(application_id, value),
            _apply_decision,
            key=application_id,
            supersedes=False,
        )
