"""Root store — one explicit object holding every resource store.

Built once at start-up and handed to whatever needs it; there is no
module-level instance.
"""

import logging

from leaseify.application.interfaces.transport import Transport
from leaseify.application.services.resource_api import (
    ApplicationApi,
    DashboardApi,
    LeaseApi,
    LogApi,
    MaintenanceApi,
    PaymentApi,
    PropertyApi,
    TaskApi,
    TenantApi,
)
from leaseify.application.state.application_store import ApplicationStore
from leaseify.application.state.dashboard_store import DashboardStore
from leaseify.application.state.lease_store import LeaseStore
from leaseify.application.state.log_store import LogStore
from leaseify.application.state.maintenance_store import MaintenanceStore
from leaseify.application.state.payment_store import PaymentStore
from leaseify.application.state.property_store import PropertyStore
from leaseify.application.state.resource_store import ResourceStore
from leaseify.application.state.task_store import TaskStore
from leaseify.application.state.tenant_store import TenantStore

logger = logging.getLogger(__name__)


class AppStore:
    """Single source of truth for client-side state, one store per resource type."""

    def __init__(self, transport: Transport):
        self._transport = transport
        self.properties = PropertyStore(PropertyApi(transport))
        self.lease = LeaseStore(LeaseApi(transport))
        self.maintenance = MaintenanceStore(MaintenanceApi(transport))
        self.dashboard = DashboardStore(DashboardApi(transport))
        self.tasks = TaskStore(TaskApi(transport))
        self.tenants = TenantStore(TenantApi(transport))
        self.payments = PaymentStore(PaymentApi(transport))
        self.logs = LogStore(LogApi(transport))
        self.applications = ApplicationStore(ApplicationApi(transport))

    @property
    def stores(self) -> dict[str, ResourceStore]:
        return {
            "properties": self.properties,
            "lease": self.lease,
            "maintenance": self.maintenance,
            "dashboard": self.dashboard,
            "tasks": self.tasks,
            "tenants": self.tenants,
            "payments": self.payments,
            "logs": self.logs,
            "applications": self.applications,
        }

    def reset_all(self) -> None:
        """Drop every cache (e.g. on logout); in-flight responses are discarded."""
        for store in self.stores.values():
            store.reset()
        logger.info("All resource stores reset")

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "AppStore":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
