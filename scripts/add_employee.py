#!/usr/bin/env python3
"""
Add an employee straight to the JSON data file.

Usage:
  python scripts/add_employee.py --name Ada --title Engineer --department R&D
      --location Remote --salary 120000 --hire-date 2024-01-15 [--data-file path.json]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from directory.core.config import get_settings  # noqa: E402
from directory.repositories.json_storage import EmployeeStore  # noqa: E402
from directory.services.validation import ValidationError, sanitize_payload  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Add an employee to the directory data file")
    ap.add_argument("--name", required=True)
    ap.add_argument("--title", required=True)
    ap.add_argument("--department", required=True)
    ap.add_argument("--location", required=True)
    ap.add_argument("--salary", required=True, help="Annual salary (rounded to an integer)")
    ap.add_argument("--hire-date", required=True, help="ISO date, e.g. 2024-01-15")
    ap.add_argument("--data-file", help="JSON file (default: EMPLOYEES_DATA_FILE or data/employees.json)")
    return ap


def main(argv: list[str] | None = None) -> str:
    args = build_parser().parse_args(argv)
    body = {
        "name": args.name,
        "title": args.title,
        "department": args.department,
        "location": args.location,
        "salary": args.salary,
        "hireDate": args.hire_date,
    }
    try:
        payload = sanitize_payload(body)
    except ValidationError as exc:
        raise SystemExit(f"Invalid employee: {exc.message}")
    data_file = Path(args.data_file) if args.data_file else get_settings().data_file
    employee = EmployeeStore(data_file).create(payload)
    print(f"Employee {employee.name} created with id {employee.id} in {data_file}")
    return employee.id


if __name__ == "__main__":
    main()
