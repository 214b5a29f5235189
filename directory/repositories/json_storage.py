"""
JSON file persistence for the employee collection.

Every operation reloads the whole file, applies one change and rewrites the
whole file. Nothing is cached between calls and there is no locking, so
concurrent writers can lose updates.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import uuid

from directory.domain.employees import Employee, EmployeePayload

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base exception for the employee store."""


class EmployeeNotFoundError(StoreError):
    """Raised when an update/delete targets an id that is not stored."""

    def __init__(self, employee_id: str) -> None:
        super().__init__("Employee not found")
        self.employee_id = employee_id


class EmployeeStore:
    """CRUD over the employee collection kept in a single JSON file."""

    def __init__(self, data_file: Path | str) -> None:
        self.data_file = Path(data_file)

    def list_all(self) -> list[Employee]:
        try:
            raw = self.data_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Employee store %s not found; initializing empty", self.data_file)
            self._persist([])
            return []
        return [Employee.from_dict(item) for item in json.loads(raw)]

    def create(self, payload: EmployeePayload) -> Employee:
        employees = self.list_all()
        employee = Employee.from_payload(str(uuid.uuid4()), payload)
        employees.append(employee)
        self._persist(employees)
        return employee

    def update(self, employee_id: str, payload: EmployeePayload) -> Employee:
        employees = self.list_all()
        for index, current in enumerate(employees):
            if current.id == employee_id:
                break
        else:
            raise EmployeeNotFoundError(employee_id)
        updated = Employee.from_payload(employee_id, payload)
        employees[index] = updated
        self._persist(employees)
        return updated

    def delete(self, employee_id: str) -> None:
        employees = self.list_all()
        remaining = [emp for emp in employees if emp.id != employee_id]
        if len(remaining) == len(employees):
            raise EmployeeNotFoundError(employee_id)
        self._persist(remaining)

    def _persist(self, employees: list[Employee]) -> None:
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        body = json.dumps([emp.to_dict() for emp in employees], ensure_ascii=False, indent=2)
        self.data_file.write_text(body, encoding="utf-8")
        logger.debug("Persisted %d employees to %s", len(employees), self.data_file)
