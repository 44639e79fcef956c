"""Store for leases: the signed-in tenant's lease and landlord assignments."""

from collections.abc import Mapping
from typing import Any

from leaseify.application.schemas.records import LeaseRecord
from leaseify.application.services.resource_api import LeaseApi
from leaseify.application.state.resource_store import (
    CREATE,
    OperationResult,
    ResourceStore,
    set_value,
    upsert,
)

MY_LEASE = "my_lease"


class LeaseStore(ResourceStore[LeaseRecord]):
    name = "lease"

    def __init__(self, api: LeaseApi):
        super().__init__(api)
        self._leases = api

    async def fetch_my_lease(self) -> OperationResult[LeaseRecord | None]:
        return await self._run(
            MY_LEASE,
            self._leases.get_mine,
            lambda state, lease: set_value(state, MY_LEASE, lease),
        )

    async def assign_lease(self, data: Mapping[str, Any]) -> OperationResult[LeaseRecord]:
        return await self._run(
            CREATE, lambda: self._leases.assign(data), upsert, supersedes=False
        )

    @property
    def my_lease(self) -> LeaseRecord | None:
        return self.state.values.get(MY_LEASE)
