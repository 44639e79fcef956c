"""Store for tenants: the full roster, the overdue list, details and scores."""

from leaseify.application.schemas.records import (
    OverdueTenantRecord,
    ReliabilityScore,
    TenantRecord,
)
from leaseify.application.services.resource_api import TenantApi
from leaseify.application.state.resource_store import (
    ErrorRecord,
    OperationResult,
    RequestStatus,
    ResourceStore,
    keyed,
    set_collection,
    set_lookup,
)

OVERDUE = "overdue"
RELIABILITY_SCORE = "reliability_score"


def score_kind(tenant_id: str) -> str:
    return keyed(RELIABILITY_SCORE, tenant_id)


class TenantStore(ResourceStore[TenantRecord]):
    """Overdue tenants live in ``collections["overdue"]``; scores are cached
    per tenant id in ``lookups["reliability_score"]``.

    Each tenant's score request has its own status and error, so one failed
    lookup never marks the other tenants' scores as failed.
    """

    name = "tenants"

    def __init__(self, api: TenantApi):
        super().__init__(api)
        self._tenants = api

    async def fetch_tenants(self) -> OperationResult[list[TenantRecord]]:
        return await self.fetch_all()

    async def fetch_tenant(self, tenant_id: str) -> OperationResult[TenantRecord]:
        return await self.fetch_one(tenant_id)

    async def fetch_overdue(self) -> OperationResult[list[OverdueTenantRecord]]:
        return await self._run(
            OVERDUE,
            self._tenants.list_overdue,
            lambda state, records: set_collection(state, OVERDUE, records),
        )

    async def fetch_reliability_score(self, tenant_id: str) -> OperationResult[ReliabilityScore]:
        return await self._run(
            score_kind(tenant_id),
            lambda: self._tenants.get_reliability_score(tenant_id),
            lambda state, score: set_lookup(state, RELIABILITY_SCORE, tenant_id, score),
        )

    @property
    def overdue(self) -> list[OverdueTenantRecord]:
        return self.state.collection(OVERDUE)

    def cached_score(self, tenant_id: str) -> ReliabilityScore | None:
        return self.state.lookup(RELIABILITY_SCORE, tenant_id)

    def score_status(self, tenant_id: str) -> RequestStatus:
        return self.status(score_kind(tenant_id))

    def score_error(self, tenant_id: str) -> ErrorRecord | None:
        return self.error(score_kind(tenant_id))
