from .error import ErrorBody
from .records import (
    Address,
    ApplicationRecord,
    ApplicationStatus,
    DashboardStats,
    LeaseRecord,
    LogEntryRecord,
    MaintenanceRequestRecord,
    MaintenanceStatus,
    OverdueTenantRecord,
    PaymentMethod,
    PaymentRecord,
    PropertyRecord,
    ReliabilityScore,
    ResourceRecord,
    TaskRecord,
    TenantRecord,
    WireModel,
)
from .task import DeletedResponse, TaskCreate, TaskResponse, TaskUpdate

__all__ = [
    "ErrorBody",
    "Address",
    "ApplicationRecord",
    "ApplicationStatus",
    "DashboardStats",
    "LeaseRecord",
    "LogEntryRecord",
    "MaintenanceRequestRecord",
    "MaintenanceStatus",
    "OverdueTenantRecord",
    "PaymentMethod",
    "PaymentRecord",
    "PropertyRecord",
    "ReliabilityScore",
    "ResourceRecord",
    "TaskRecord",
    "TenantRecord",
    "WireModel",
    "DeletedResponse",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
]
