"""Unit tests for the resource-specific stores and the root AppStore."""

import asyncio
from typing import Any

import pytest

from leaseify.application.interfaces import Transport
from leaseify.application.schemas.records import ApplicationStatus, MaintenanceStatus
from leaseify.application.state import AppStore
from leaseify.application.state.dashboard_store import STATS
from leaseify.application.state.lease_store import MY_LEASE
from leaseify.domain.entities import RequestStatus
from leaseify.domain.exceptions import ApiError

ADDRESS = {"street": "12 Oak St", "city": "Austin", "state": "TX", "zipCode": "78701"}


class RecordingTransport(Transport):
    """Answers (method, path) with canned payloads; echoes PUT bodies onto a base record."""

    def __init__(self, routes: dict[tuple[str, str], Any]):
        self.routes = routes
        self.requests: list[tuple[str, str, Any, Any]] = []
        self.closed = False

    async def request(self, method, path, *, json=None, params=None):
        self.requests.append((method, path, json, params))
        outcome = self.routes[(method, path)]
        if isinstance(outcome, Exception):
            raise outcome
        if callable(outcome):
            return outcome(json)
        return outcome

    async def aclose(self) -> None:
        self.closed = True


# ── Payloads shaped like the REST controllers' responses ──


def _application(app_id: str, status: str = "Pending", **fields: Any) -> dict:
    # landlord list and status update populate applicant and property
    return {
        "_id": app_id,
        "applicant": {"_id": "u9", "name": "Dee", "email": "dee@example.com"},
        "property": {"_id": "h1", "address": ADDRESS},
        "landlord": "l1",
        "organization": "o1",
        "status": status,
        "message": "Looking for a 1BR",
        "createdAt": "2025-03-01T10:00:00.000Z",
        **fields,
    }


def _tenant_maintenance(request_id: str, description: str, status: str = "Pending") -> dict:
    # the tenant list is flattened to these five fields
    return {
        "_id": request_id,
        "description": description,
        "status": status,
        "createdAt": "2025-03-02T09:30:00.000Z",
        "property": {"_id": "h1", "address": ADDRESS},
    }


def _landlord_maintenance(request_id: str, description: str, status: str = "Pending") -> dict:
    return {
        "_id": request_id,
        "description": description,
        "status": status,
        "lease": "L1",
        "organization": "o1",
        "tenant": {"_id": "u1", "name": "Ana", "email": "ana@example.com"},
        "property": {"_id": "h1", "address": ADDRESS},
        "createdAt": "2025-03-02T09:30:00.000Z",
        "updatedAt": "2025-03-02T09:30:00.000Z",
    }


def _payment(payment_id: str, amount: float, method: str = "Stripe Online", **fields: Any) -> dict:
    return {
        "_id": payment_id,
        "property": "h1",
        "lease": "L1",
        "tenant": "u1",
        "organization": "o1",
        "amount": amount,
        "paymentDate": "2025-02-01T00:00:00.000Z",
        "method": method,
        **fields,
    }


def _lease(lease_id: str, **fields: Any) -> dict:
    return {
        "_id": lease_id,
        "property": "h1",
        "tenant": "u1",
        "organization": "o1",
        "startDate": "2025-01-01T00:00:00.000Z",
        "endDate": "2025-12-31T00:00:00.000Z",
        "rentAmount": 1500,
        "status": "active",
        **fields,
    }


def _property(property_id: str, *, lease_id: str | None = None) -> dict:
    # the landlord list adds status and activeLeaseId to each document
    return {
        "_id": property_id,
        "organization": "o1",
        "owner": "l1",
        "address": ADDRESS,
        "rentAmount": 1500,
        "isListed": True,
        "propertyType": "Apartment",
        "bedrooms": 2,
        "bathrooms": 1,
        "status": "Rented" if lease_id else "Vacant",
        "activeLeaseId": lease_id,
    }


def _log(log_id: str, message: str, log_type: str = "Communication") -> dict:
    return {
        "_id": log_id,
        "organization": "o1",
        "actor": {"_id": "l1", "name": "Lee"},
        "type": log_type,
        "message": message,
        "tenant": {"_id": "u1", "name": "Ana"},
        "property": {"_id": "h1", "address": {"street": "12 Oak St"}},
        "createdAt": "2025-03-03T12:00:00.000Z",
    }


# ── Applications ──


@pytest.mark.asyncio
async def test_decided_application_leaves_pending_list():
    base = _application("a1")
    transport = RecordingTransport(
        {
            ("GET", "applications"): [base, _application("a2")],
            ("PUT", "applications/a1"): lambda body: {**base, **body},
        }
    )
    app_store = AppStore(transport)

    await app_store.applications.fetch_applications()
    await app_store.applications.update_status("a1", ApplicationStatus.APPROVED)

    assert [a.id for a in app_store.applications.state.items] == ["a2"]
    assert transport.requests[-1][2] == {"status": "Approved"}


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [ApplicationStatus.DENIED, ApplicationStatus.COMPLETED])
async def test_every_decision_removes_application(status):
    base = _application("a1")
    transport = RecordingTransport(
        {
            ("GET", "applications"): [base],
            ("PUT", "applications/a1"): lambda body: {**base, **body},
        }
    )
    app_store = AppStore(transport)

    await app_store.applications.fetch_applications()
    await app_store.applications.update_status("a1", status)

    assert app_store.applications.state.items == []
    assert transport.requests[-1][2] == {"status": status.value}


@pytest.mark.asyncio
async def test_pending_application_update_replaces_in_place():
    base = _application("a1")
    transport = RecordingTransport(
        {
            ("GET", "applications"): [base],
            ("PUT", "applications/a1"): lambda body: {**base, **body, "message": "edited"},
        }
    )
    app_store = AppStore(transport)

    await app_store.applications.fetch_applications()
    await app_store.applications.update_status("a1", "Pending")

    record = app_store.applications.state.find("a1")
    assert record.message == "edited"
    assert record.status == ApplicationStatus.PENDING
    assert record.applicant["name"] == "Dee"


# ── Maintenance ──


@pytest.mark.asyncio
async def test_new_maintenance_request_is_shown_first():
    created = {
        "_id": "m2",
        "description": "Broken heater",
        "status": "Pending",
        "lease": "L1",
        "property": "h1",
        "tenant": "u1",
        "organization": "o1",
        "createdAt": "2025-03-04T08:00:00.000Z",
        "updatedAt": "2025-03-04T08:00:00.000Z",
    }
    transport = RecordingTransport(
        {
            ("GET", "tenant/maintenance-requests/"): [_tenant_maintenance("m1", "Leaky tap")],
            ("POST", "tenant/maintenance-requests/"): created,
        }
    )
    app_store = AppStore(transport)

    await app_store.maintenance.fetch_for_tenant()
    await app_store.maintenance.create_request({"description": "Broken heater"})

    items = app_store.maintenance.state.items
    assert [m.id for m in items] == ["m2", "m1"]
    assert [m.description for m in items] == ["Broken heater", "Leaky tap"]


@pytest.mark.asyncio
async def test_landlord_updates_maintenance_status():
    base = _landlord_maintenance("m1", "Leaky tap")
    transport = RecordingTransport(
        {
            ("GET", "landlord/maintenance-requests/"): [base],
            ("PUT", "landlord/maintenance-requests/m1"): lambda body: {**base, **body},
        }
    )
    app_store = AppStore(transport)

    await app_store.maintenance.fetch_for_landlord()
    await app_store.maintenance.update_status("m1", MaintenanceStatus.IN_PROGRESS)

    record = app_store.maintenance.state.find("m1")
    assert record.status == "In Progress"
    assert record.tenant["email"] == "ana@example.com"


@pytest.mark.asyncio
async def test_deleted_maintenance_request_is_removed():
    transport = RecordingTransport(
        {
            ("GET", "landlord/maintenance-requests/"): [
                _landlord_maintenance("m1", "Leaky tap"),
                _landlord_maintenance("m2", "Broken heater"),
            ],
            ("DELETE", "landlord/maintenance-requests/m1"): {
                "id": "m1",
                "message": "Request deleted",
            },
        }
    )
    app_store = AppStore(transport)

    await app_store.maintenance.fetch_for_landlord()
    await app_store.maintenance.delete_request("m1")

    assert [m.id for m in app_store.maintenance.state.items] == ["m2"]


# ── Payments ──


@pytest.mark.asyncio
async def test_switching_leases_never_shows_older_history():
    futures: dict[str, asyncio.Future] = {}

    class SlowTransport(Transport):
        async def request(self, method, path, *, json=None, params=None):
            futures[path] = asyncio.get_running_loop().create_future()
            return await futures[path]

    app_store = AppStore(SlowTransport())
    payments = app_store.payments

    first = asyncio.create_task(payments.fetch_for_lease("L1"))
    await asyncio.sleep(0)
    second = asyncio.create_task(payments.fetch_for_lease("L2"))
    await asyncio.sleep(0)

    futures["landlord/payments/lease/L2"].set_result([_payment("p2", 900, lease="L2")])
    await second
    futures["landlord/payments/lease/L1"].set_result([_payment("p1", 800)])
    await first

    assert [p.id for p in payments.state.items] == ["p2"]


@pytest.mark.asyncio
async def test_logging_offline_payment_adds_it_to_history():
    # log-offline answers 201 with tenant, property and lease populated
    logged = _payment(
        "p2",
        800,
        "Manual - Cash",
        tenant={"_id": "u1", "name": "Ana"},
        property={"_id": "h1", "address": ADDRESS},
        lease={
            "_id": "L1",
            "startDate": "2025-01-01T00:00:00.000Z",
            "endDate": "2025-12-31T00:00:00.000Z",
            "rentAmount": 1500,
        },
        notes="Paid at the office",
    )
    transport = RecordingTransport(
        {
            ("GET", "tenant/payments/my-payments"): [
                _payment("p1", 800, property={"_id": "h1", "address": {"street": "12 Oak St"}})
            ],
            ("POST", "landlord/payments/log-offline"): logged,
        }
    )
    app_store = AppStore(transport)

    await app_store.payments.fetch_mine()
    await app_store.payments.log_offline_payment(
        {"leaseId": "L1", "amount": 800, "method": "Manual - Cash"}
    )

    items = app_store.payments.state.items
    assert [p.id for p in items] == ["p1", "p2"]
    assert items[1].tenant["name"] == "Ana"
    assert items[1].lease["rentAmount"] == 1500


# ── Lease, dashboard, properties ──


@pytest.mark.asyncio
async def test_tenant_without_lease_gets_none():
    transport = RecordingTransport(
        {
            ("GET", "tenant/lease/my-lease"): ApiError(
                "No active lease found for this user.", 404
            )
        }
    )
    app_store = AppStore(transport)

    result = await app_store.lease.fetch_my_lease()

    assert result.ok
    assert app_store.lease.my_lease is None
    assert app_store.lease.status(MY_LEASE) is RequestStatus.SUCCEEDED


@pytest.mark.asyncio
async def test_my_lease_server_error_is_reported():
    transport = RecordingTransport(
        {("GET", "tenant/lease/my-lease"): ApiError("Server Error", 500)}
    )
    app_store = AppStore(transport)

    result = await app_store.lease.fetch_my_lease()

    assert not result.ok
    assert app_store.lease.error(MY_LEASE).status_code == 500


@pytest.mark.asyncio
async def test_my_lease_is_stored_as_a_value():
    transport = RecordingTransport(
        {
            ("GET", "tenant/lease/my-lease"): _lease(
                "L1", property={"_id": "h1", "address": ADDRESS, "rentAmount": 1500}
            )
        }
    )
    app_store = AppStore(transport)

    await app_store.lease.fetch_my_lease()

    lease = app_store.lease.my_lease
    assert lease.rent_amount == 1500
    assert lease.property["address"]["city"] == "Austin"
    assert app_store.lease.state.items == []


@pytest.mark.asyncio
async def test_assigned_lease_is_unwrapped_and_cached():
    transport = RecordingTransport(
        {
            ("POST", "landlord/leases/assign"): {
                "message": "Tenant successfully assigned and lease created.",
                "lease": _lease("L7"),
            }
        }
    )
    app_store = AppStore(transport)

    result = await app_store.lease.assign_lease(
        {"propertyId": "h1", "tenantEmail": "ana@example.com"}
    )

    assert result.ok
    assert result.payload.id == "L7"
    assert [lease.id for lease in app_store.lease.state.items] == ["L7"]
    assert app_store.lease.state.items[0].status == "active"


@pytest.mark.asyncio
async def test_dashboard_stats():
    transport = RecordingTransport(
        {
            ("GET", "landlord/dashboard/stats"): {
                "totalProperties": 4,
                "vacantUnits": 1,
                "totalMonthlyRent": 5400,
                "openMaintenanceCount": 3,
                "highPriorityMaintenance": 1,
                "occupancyRate": 75,
            }
        }
    )
    app_store = AppStore(transport)

    await app_store.dashboard.fetch_stats()

    stats = app_store.dashboard.stats
    assert stats.total_properties == 4
    assert stats.vacant_units == 1
    assert stats.occupied_units == 3
    assert stats.total_monthly_rent == 5400
    assert stats.open_maintenance_count == 3
    assert stats.occupancy_rate == 75
    assert app_store.dashboard.status(STATS) is RequestStatus.SUCCEEDED


@pytest.mark.asyncio
async def test_properties_are_fetched_paged():
    transport = RecordingTransport(
        {("GET", "landlord/properties/"): [_property("h1", lease_id="L1"), _property("h2")]}
    )
    app_store = AppStore(transport)

    await app_store.properties.fetch_properties(page=2)

    assert transport.requests[0][3] == {"page": 2, "limit": 9}
    rented, vacant = app_store.properties.state.items
    assert rented.address.city == "Austin"
    assert rented.address.zip_code == "78701"
    assert (rented.status, rented.active_lease_id) == ("Rented", "L1")
    assert (vacant.status, vacant.active_lease_id) == ("Vacant", None)


# ── AppStore ──


@pytest.mark.asyncio
async def test_reset_all_clears_every_store():
    transport = RecordingTransport(
        {
            ("GET", "landlord/tasks/"): [{"_id": "t1", "title": "Fix sink"}],
            ("GET", "landlord/logs/"): [_log("g1", "Called Ana")],
        }
    )
    app_store = AppStore(transport)
    await app_store.tasks.fetch_tasks()
    await app_store.logs.fetch_logs()
    assert app_store.logs.state.items[0].actor["name"] == "Lee"

    app_store.reset_all()

    assert all(store.state.items == [] for store in app_store.stores.values())
    assert app_store.tasks.status("list") is RequestStatus.IDLE


@pytest.mark.asyncio
async def test_stores_are_independent():
    transport = RecordingTransport(
        {("GET", "landlord/tasks/"): [{"_id": "t1", "title": "Fix sink"}]}
    )
    app_store = AppStore(transport)

    await app_store.tasks.fetch_tasks()

    assert len(app_store.tasks.state.items) == 1
    assert app_store.logs.state.items == []
    assert app_store.logs.status("list") is RequestStatus.IDLE


@pytest.mark.asyncio
async def test_context_manager_closes_transport():
    transport = RecordingTransport({})

    async with AppStore(transport) as app_store:
        assert set(app_store.stores) >= {"tasks", "tenants", "payments"}

    assert transport.closed
