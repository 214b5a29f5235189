"""Employee records and their JSON shape."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

STORED_KEYS = frozenset({"id", "name", "title", "department", "location", "salary", "hireDate"})


@dataclass(frozen=True)
class EmployeePayload:
    """Client-supplied fields of an employee (everything but the id)."""

    name: str
    title: str
    department: str
    location: str
    salary: int
    hire_date: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "title": self.title,
            "department": self.department,
            "location": self.location,
            "salary": self.salary,
            "hireDate": self.hire_date,
        }


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    title: str
    department: str
    location: str
    salary: int
    hire_date: str
    # stored keys the model does not know, written back untouched
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, employee_id: str, payload: EmployeePayload) -> "Employee":
        return cls(
            id=employee_id,
            name=payload.name,
            title=payload.title,
            department=payload.department,
            location=payload.location,
            salary=payload.salary,
            hire_date=payload.hire_date,
        )

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Employee":
        """Build an Employee from a stored record; missing keys raise KeyError."""
        extra = {key: value for key, value in raw.items() if key not in STORED_KEYS}
        return cls(
            id=str(raw["id"]),
            name=raw["name"],
            title=raw["title"],
            department=raw["department"],
            location=raw["location"],
            salary=raw["salary"],
            hire_date=raw["hireDate"],
            extra=extra,
        )

    def to_dict(self) -> dict:
        return {
            **self.extra,
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "department": self.department,
            "location": self.location,
            "salary": self.salary,
            "hireDate": self.hire_date,
        }
