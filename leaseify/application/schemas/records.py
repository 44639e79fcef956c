"""Client-side records — typed views of the JSON documents the REST API returns.

Stored documents carry a server-assigned ``_id`` plus camelCase fields;
computed summaries (overdue rows, reliability scores, dashboard stats) have
no ``_id`` and derive from ``WireModel`` directly. Fields the server may omit
are optional, and unknown fields are kept so nothing the server sends is
silently dropped.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for every payload exchanged with the REST API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class ResourceRecord(WireModel):
    """A record identified by an immutable, server-assigned id."""

    id: str = Field(
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
    )


# ── Enums ────────────────────────────────────────────────────────────


class ApplicationStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    DENIED = "Denied"
    COMPLETED = "Completed"


class MaintenanceStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class PaymentMethod(str, Enum):
    STRIPE_ONLINE = "Stripe Online"
    MANUAL_CASH = "Manual - Cash"
    MANUAL_CHECK = "Manual - Check"
    MANUAL_OTHER = "Manual - Other"


# Populated references arrive as sub-documents, unpopulated ones as ids
Ref = str | dict[str, Any] | None


# ── Records ──────────────────────────────────────────────────────────


class TaskRecord(ResourceRecord):
    title: str
    is_completed: bool = False
    due_date: datetime | None = None


class TenantRecord(ResourceRecord):
    name: str
    email: str | None = None
    phone: str | None = None


class OverdueTenantRecord(WireModel):
    """One row of the overdue report, computed per active lease.

    ``amount`` is the rent owed to date; ``unit`` is the property's street.
    """

    tenant_id: str
    lease_id: str | None = None
    name: str | None = None
    email: str | None = None
    unit: str | None = None
    amount: float = 0.0
    days: int | None = None

    @property
    def id(self) -> str:
        return self.tenant_id


class ReliabilityScore(WireModel):
    """Payment reliability of one tenant, as a percentage when known."""

    tenant_id: str | None = None
    score: float | None = None
    message: str | None = None
    on_time_payments: int | None = None
    total_payments_due: int | None = None

    @property
    def band(self) -> str:
        if self.score is None:
            return "unknown"
        if self.score >= 90:
            return "good"
        if self.score >= 70:
            return "fair"
        return "poor"

    @property
    def label(self) -> str:
        if self.score is None:
            return "N/A"
        return f"{self.score:g}%"

    @property
    def summary(self) -> str:
        if self.message:
            return self.message
        return f"On-Time Payments: {self.on_time_payments} / {self.total_payments_due}"


class PaymentRecord(ResourceRecord):
    amount: float
    payment_date: datetime | None = None
    method: PaymentMethod | str | None = None
    notes: str | None = None
    lease: Ref = None
    tenant: Ref = None
    property: Ref = None


class ApplicationRecord(ResourceRecord):
    status: ApplicationStatus | str = ApplicationStatus.PENDING
    property: Ref = None
    applicant: Ref = None
    requested_start_date: datetime | None = None
    requested_end_date: datetime | None = None
    message: str | None = None
    created_at: datetime | None = None


class MaintenanceRequestRecord(ResourceRecord):
    """A tenant's repair request. The landlord list populates ``tenant`` and
    ``property``; the tenant's own list carries ``property`` only."""

    description: str | None = None
    status: MaintenanceStatus | str = MaintenanceStatus.PENDING
    lease: Ref = None
    property: Ref = None
    tenant: Ref = None
    created_at: datetime | None = None


class Address(WireModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


class PropertyRecord(ResourceRecord):
    address: Address | None = None
    rent_amount: float | None = None
    is_listed: bool = False
    property_type: str | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    description: str | None = None
    image_url: str | None = None
    # computed by the landlord list: "Rented" or "Vacant"
    status: str | None = None
    active_lease_id: str | None = None


class LeaseRecord(ResourceRecord):
    property: Ref = None
    tenant: Ref = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    rent_amount: float | None = None
    status: str | None = None


class LogEntryRecord(ResourceRecord):
    message: str
    type: str | None = None
    actor: str | dict[str, Any] | None = None
    tenant: Ref = None
    property: Ref = None
    created_at: datetime | None = None


class DashboardStats(WireModel):
    """Aggregates shown on the landlord dashboard header cards."""

    total_properties: int = 0
    vacant_units: int = 0
    total_monthly_rent: float = 0.0
    open_maintenance_count: int = 0
    high_priority_maintenance: int = 0
    occupancy_rate: float = 0.0

    @property
    def occupied_units(self) -> int:
        return self.total_properties - self.vacant_units
