from .resource_api import (
    ApplicationApi,
    DashboardApi,
    LeaseApi,
    LogApi,
    MaintenanceApi,
    PaymentApi,
    PropertyApi,
    ResourceApi,
    TaskApi,
    TenantApi,
)
from .task_service import TaskService

__all__ = [
    "ApplicationApi",
    "DashboardApi",
    "LeaseApi",
    "LogApi",
    "MaintenanceApi",
    "PaymentApi",
    "PropertyApi",
    "ResourceApi",
    "TaskApi",
    "TenantApi",
    "TaskService",
]
