from .app_store import AppStore
from .application_store import ApplicationStore
from .dashboard_store import DashboardStore
from .lease_store import LeaseStore
from .log_store import LogStore
from .maintenance_store import MaintenanceStore
from .payment_store import PaymentStore
from .property_store import PropertyStore
from .resource_store import OperationResult, ResourceState, ResourceStore
from .task_store import TaskStore
from .tenant_store import TenantStore

__all__ = [
    "AppStore",
    "ApplicationStore",
    "DashboardStore",
    "LeaseStore",
    "LogStore",
    "MaintenanceStore",
    "PaymentStore",
    "PropertyStore",
    "OperationResult",
    "ResourceState",
    "ResourceStore",
    "TaskStore",
    "TenantStore",
]
