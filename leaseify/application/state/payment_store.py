"""Store for payment history (a lease's payments, or the tenant's own)."""

from collections.abc import Mapping
from typing import Any

from leaseify.application.schemas.records import PaymentRecord
from leaseify.application.services.resource_api import PaymentApi
from leaseify.application.state.resource_store import (
    CREATE,
    LIST,
    OperationResult,
    ResourceStore,
    replace_items,
    upsert,
)


class PaymentStore(ResourceStore[PaymentRecord]):
    """Both history fetches fill ``items`` and share the list channel, so
    switching from one lease to another never shows the older response."""

    name = "payments"

    def __init__(self, api: PaymentApi):
        super().__init__(api)
        self._payments = api

    async def fetch_for_lease(self, lease_id: str) -> OperationResult[list[PaymentRecord]]:
        return await self._run(
            LIST, lambda: self._payments.list_for_lease(lease_id), replace_items
        )

    async def fetch_mine(self) -> OperationResult[list[PaymentRecord]]:
        return await self._run(LIST, self._payments.list_mine, replace_items)

    async def log_offline_payment(self, data: Mapping[str, Any]) -> OperationResult[PaymentRecord]:
        return await self._run(
            CREATE,
            lambda: self._payments.log_offline(data),
            upsert,
            supersedes=False,
        )
