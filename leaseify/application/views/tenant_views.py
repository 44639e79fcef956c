"""Tenant detail page and the reliability score badge."""

from leaseify.application.schemas.records import ReliabilityScore, TenantRecord
from leaseify.application.state.resource_store import GET, OperationResult, ResourceState
from leaseify.application.state.tenant_store import RELIABILITY_SCORE, TenantStore, score_kind
from leaseify.application.views.base import ChangeCallback, ResourceView


class TenantDetailView(ResourceView[TenantRecord | None]):
    """Shows one tenant; a different tenant id triggers a new fetch."""

    def __init__(self, store: TenantStore, on_change: ChangeCallback | None = None):
        super().__init__(
            store,
            load=store.fetch_tenant,
            select=self._current_tenant,
            kind=GET,
            on_change=on_change,
        )

    def _current_tenant(self, state: ResourceState[TenantRecord]) -> TenantRecord | None:
        # never show the previously selected tenant under a new id
        if state.selected is not None and state.selected.id == self.key:
            return state.selected
        return None


class ReliabilityScoreBadge(ResourceView[ReliabilityScore | None]):
    """Score badge for one tenant; fetches only when the score is not cached."""

    def __init__(self, store: TenantStore, tenant_id: str, on_change: ChangeCallback | None = None):
        super().__init__(
            store,
            load=store.fetch_reliability_score,
            select=lambda state: state.lookup(RELIABILITY_SCORE, tenant_id),
            kind=score_kind(tenant_id),
            on_change=on_change,
        )
        self._tenants = store
        self.tenant_id = tenant_id

    async def show(self, key: str | None = None) -> OperationResult[ReliabilityScore] | None:
        if self._tenants.cached_score(self.tenant_id) is not None:
            return None
        return await super().show(key or self.tenant_id)

    @property
    def label(self) -> str:
        return self.data.label if self.data is not None else "N/A"

    @property
    def band(self) -> str:
        return self.data.band if self.data is not None else "unknown"

    @property
    def summary(self) -> str:
        return self.data.summary if self.data is not None else ""
