"""Normalization and validation of client-supplied employee payloads."""

from __future__ import annotations

from datetime import datetime
import math
from typing import Any, Mapping

from directory.domain.employees import EmployeePayload

REQUIRED_TEXT_FIELDS = ("name", "title", "department", "location")


class ValidationError(ValueError):
    """Raised when a payload field is missing or malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def sanitize_payload(body: Mapping[str, Any]) -> EmployeePayload:
    """
    Turn an untrusted request body into an EmployeePayload.

    Checks run in a fixed order and stop at the first failure: the four text
    fields, hireDate presence, salary, then hireDate format. Strings come back
    trimmed, salary rounded half-up and hireDate as YYYY-MM-DD.
    """
    name, title, department, location = (
        _require_string(body.get(field), field) for field in REQUIRED_TEXT_FIELDS
    )
    hire_date_raw = _require_string(body.get("hireDate"), "hireDate")

    salary = _to_number(body.get("salary"))
    if salary is None or not math.isfinite(salary):
        raise ValidationError("salary", "salary must be a number")

    hire_date = _parse_date(hire_date_raw)
    if hire_date is None:
        raise ValidationError("hireDate", "hireDate must be a valid date")

    return EmployeePayload(
        name=name,
        title=title,
        department=department,
        location=location,
        salary=math.floor(salary + 0.5),
        hire_date=hire_date,
    )


def _require_string(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, f"{field} is required")
    return value.strip()


def _to_number(value: Any) -> float | None:
    # bool is an int subclass; "true" is not a salary
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    # float() also takes digit separators ("1_000"), which are not a salary
    if isinstance(value, str) and value.strip() and "_" not in value:
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _parse_date(value: str) -> str | None:
    candidate = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    return parsed.date().isoformat()
