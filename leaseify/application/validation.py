"""Presence validation for user-submitted forms.

Validators run before a create/update is dispatched and return a
``ValidationResult`` instead of raising, so a view can show every field
message at once.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def messages(self) -> list[str]:
        return [f"{name}: {message}" for name, message in self.errors.items()]


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require(data: Mapping[str, Any], fields: Mapping[str, str]) -> ValidationResult:
    """Check that every field in ``fields`` (name → label) is present and non-blank."""
    errors = {
        name: f"{label} is required"
        for name, label in fields.items()
        if _is_blank(data.get(name))
    }
    return ValidationResult(errors)


def _positive_amount(data: Mapping[str, Any], name: str, errors: dict[str, str]) -> None:
    raw = data.get(name)
    try:
        amount = float(raw) if not _is_blank(raw) else 0.0
    except (TypeError, ValueError):
        amount = 0.0
    if amount <= 0:
        errors[name] = "Amount must be greater than 0"


def validate_task(data: Mapping[str, Any]) -> ValidationResult:
    return require(data, {"title": "Title"})


def validate_log_entry(data: Mapping[str, Any]) -> ValidationResult:
    return require(data, {"message": "Message"})


def validate_application(data: Mapping[str, Any]) -> ValidationResult:
    return require(
        data,
        {
            "requestedStartDate": "Requested start date",
            "requestedEndDate": "Requested end date",
        },
    )


def validate_property(data: Mapping[str, Any]) -> ValidationResult:
    address = data.get("address")
    fields = dict(address) if isinstance(address, Mapping) else dict(data)
    fields.setdefault("rentAmount", data.get("rentAmount"))
    return require(
        fields,
        {
            "street": "Street",
            "city": "City",
            "state": "State",
            "zipCode": "Zip code",
            "rentAmount": "Rent amount",
        },
    )


def validate_lease_assignment(data: Mapping[str, Any]) -> ValidationResult:
    return require(
        data,
        {
            "tenantEmail": "Tenant email",
            "startDate": "Start date",
            "endDate": "End date",
            "rentAmount": "Rent amount",
        },
    )


def validate_offline_payment(data: Mapping[str, Any]) -> ValidationResult:
    errors = dict(
        require(
            data,
            {
                "leaseId": "Lease ID",
                "paymentDate": "Payment date",
                "method": "Payment method",
            },
        ).errors
    )
    _positive_amount(data, "amount", errors)
    return ValidationResult(errors)
