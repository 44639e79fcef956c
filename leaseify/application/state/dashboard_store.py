"""Store for the landlord dashboard's headline statistics."""

from leaseify.application.schemas.records import DashboardStats
from leaseify.application.services.resource_api import DashboardApi
from leaseify.application.state.resource_store import (
    OperationResult,
    ResourceStore,
    set_value,
)

STATS = "stats"


class DashboardStore(ResourceStore):
    """Holds a single ``DashboardStats`` value; it has no record collection."""

    name = "dashboard"

    def __init__(self, api: DashboardApi):
        super().__init__(api)  # type: ignore[arg-type]
        self._dashboard = api

    async def fetch_stats(self) -> OperationResult[DashboardStats]:
        return await self._run(
            STATS,
            self._dashboard.get_stats,
            lambda state, stats: set_value(state, STATS, stats),
        )

    @property
    def stats(self) -> DashboardStats | None:
        return self.state.values.get(STATS)
