"""Per-resource REST adapters.

Each adapter knows the paths of one resource type and turns raw JSON into
typed records. A payload that does not match the record schema is reported
as an ``ApiError`` carrying the validation details, the same way a server
side validation failure is.
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from leaseify.application.interfaces.transport import Transport
from leaseify.application.schemas.records import (
    ApplicationRecord,
    DashboardStats,
    LeaseRecord,
    LogEntryRecord,
    MaintenanceRequestRecord,
    OverdueTenantRecord,
    PaymentRecord,
    PropertyRecord,
    ReliabilityScore,
    TaskRecord,
    TenantRecord,
)
from leaseify.domain.exceptions import ApiError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
R = TypeVar("R", bound=BaseModel)


def parse_one(model: type[M], payload: Any) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise _shape_error(model, exc) from exc


def parse_many(model: type[M], payload: Any) -> list[M]:
    if not isinstance(payload, list):
        raise ApiError(
            f"Unexpected response shape for {model.__name__}: expected a list",
        )
    try:
        return [model.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise _shape_error(model, exc) from exc


def _shape_error(model: type[BaseModel], exc: ValidationError) -> ApiError:
    details = [
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    logger.warning("Response did not match %s: %s", model.__name__, details)
    return ApiError(f"Unexpected response shape for {model.__name__}", errors=details)


def deleted_id(payload: Any, requested_id: str) -> str:
    """Delete endpoints echo ``{id, message}``; fall back to the requested id."""
    if isinstance(payload, Mapping):
        echoed = payload.get("id") or payload.get("_id")
        if echoed:
            return str(echoed)
    return requested_id


class ResourceApi(Generic[R]):
    """Generic list/get/create/update/delete adapter for one REST collection."""

    path: str = ""
    record_type: type[R]

    def __init__(self, transport: Transport):
        self._transport = transport

    def _item_path(self, record_id: str) -> str:
        return f"{self.path.rstrip('/')}/{record_id}"

    async def list_all(self, **params: Any) -> list[R]:
        payload = await self._transport.request("GET", self.path, params=params or None)
        return parse_many(self.record_type, payload)

    async def get(self, record_id: str) -> R:
        payload = await self._transport.request("GET", self._item_path(record_id))
        return parse_one(self.record_type, payload)

    async def create(self, data: Mapping[str, Any]) -> R:
        payload = await self._transport.request("POST", self.path, json=dict(data))
        return parse_one(self.record_type, payload)

    async def update(self, record_id: str, patch: Mapping[str, Any]) -> R:
        payload = await self._transport.request(
            "PUT", self._item_path(record_id), json=dict(patch)
        )
        return parse_one(self.record_type, payload)

    async def delete(self, record_id: str) -> str:
        payload = await self._transport.request("DELETE", self._item_path(record_id))
        return deleted_id(payload, record_id)


class TaskApi(ResourceApi[TaskRecord]):
    path = "landlord/tasks/"
    record_type = TaskRecord


class TenantApi(ResourceApi[TenantRecord]):
    path = "landlord/tenants/"
    record_type = TenantRecord

    async def list_overdue(self) -> list[OverdueTenantRecord]:
        payload = await self._transport.request("GET", self.path + "overdue")
        return parse_many(OverdueTenantRecord, payload)

    async def get_reliability_score(self, tenant_id: str) -> ReliabilityScore:
        payload = await self._transport.request(
            "GET", f"{self.path}{tenant_id}/reliability-score"
        )
        return parse_one(ReliabilityScore, payload)


class PaymentApi(ResourceApi[PaymentRecord]):
    path = "landlord/payments/"
    tenant_path = "tenant/payments/"
    record_type = PaymentRecord

    async def log_offline(self, data: Mapping[str, Any]) -> PaymentRecord:
        payload = await self._transport.request(
            "POST", self.path + "log-offline", json=dict(data)
        )
        return parse_one(PaymentRecord, payload)

    async def list_for_lease(self, lease_id: str) -> list[PaymentRecord]:
        payload = await self._transport.request("GET", f"{self.path}lease/{lease_id}")
        return parse_many(PaymentRecord, payload)

    async def list_mine(self) -> list[PaymentRecord]:
        payload = await self._transport.request("GET", self.tenant_path + "my-payments")
        return parse_many(PaymentRecord, payload)


class ApplicationApi(ResourceApi[ApplicationRecord]):
    path = "applications"
    record_type = ApplicationRecord

    async def update_status(self, application_id: str, status: str) -> ApplicationRecord:
        return await self.update(application_id, {"status": status})


class MaintenanceApi(ResourceApi[MaintenanceRequestRecord]):
    """Tenants file requests; landlords triage and resolve them."""

    path = "landlord/maintenance-requests/"
    tenant_path = "tenant/maintenance-requests/"
    record_type = MaintenanceRequestRecord

    async def create(self, data: Mapping[str, Any]) -> MaintenanceRequestRecord:
        payload = await self._transport.request("POST", self.tenant_path, json=dict(data))
        return parse_one(MaintenanceRequestRecord, payload)

    async def list_for_tenant(self) -> list[MaintenanceRequestRecord]:
        payload = await self._transport.request("GET", self.tenant_path)
        return parse_many(MaintenanceRequestRecord, payload)

    async def list_for_landlord(self) -> list[MaintenanceRequestRecord]:
        return await self.list_all()

    async def update_status(self, request_id: str, status: str) -> MaintenanceRequestRecord:
        return await self.update(request_id, {"status": status})


class PropertyApi(ResourceApi[PropertyRecord]):
    path = "landlord/properties/"
    record_type = PropertyRecord

    async def list_all(self, page: int = 1, limit: int = 9, **params: Any) -> list[PropertyRecord]:
        return await super().list_all(page=page, limit=limit, **params)


class LeaseApi(ResourceApi[LeaseRecord]):
    path = "landlord/leases/"
    tenant_path = "tenant/lease/"
    record_type = LeaseRecord

    async def get_mine(self) -> LeaseRecord | None:
        """The tenant's active lease; ``None`` when the server has none (404)."""
        try:
            payload = await self._transport.request("GET", self.tenant_path + "my-lease")
        except ApiError as exc:
            if exc.status_code == 404:
                return None
            raise
        if payload is None:
            return None
        return parse_one(LeaseRecord, payload)

    async def assign(self, data: Mapping[str, Any]) -> LeaseRecord:
        payload = await self._transport.request("POST", self.path + "assign", json=dict(data))
        # the created lease comes wrapped as ``{message, lease}``
        if isinstance(payload, Mapping) and "lease" in payload:
            payload = payload["lease"]
        return parse_one(LeaseRecord, payload)


class LogApi(ResourceApi[LogEntryRecord]):
    path = "landlord/logs/"
    record_type = LogEntryRecord


class DashboardApi:
    path = "landlord/dashboard/"

    def __init__(self, transport: Transport):
        self._transport = transport

    async def get_stats(self) -> DashboardStats:
        payload = await self._transport.request("GET", self.path + "stats")
        return parse_one(DashboardStats, payload)
