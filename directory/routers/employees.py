from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from directory.repositories.json_storage import EmployeeNotFoundError, EmployeeStore
from directory.services.validation import ValidationError, sanitize_payload

router = APIRouter(prefix="/api/employees", tags=["employees"])
logger = logging.getLogger(__name__)


def get_employee_store(request: Request) -> EmployeeStore:
    store = getattr(getattr(request.app, "state", None), "employee_store", None)
    if not store:
        raise RuntimeError("EmployeeStore not configured")
    return store


async def _read_body(request: Request) -> dict[str, Any] | None:
    """Parse the JSON body; None when it is not valid JSON, {} when not an object."""
    try:
        body = await request.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else {}


def _missing_id() -> PlainTextResponse:
    return PlainTextResponse("Missing employee id", status_code=400)


def _invalid(exc: ValidationError) -> PlainTextResponse:
    logger.info("Rejected employee payload (%s): %s", exc.field, exc.message)
    return PlainTextResponse(exc.message, status_code=400)


def _not_found(exc: EmployeeNotFoundError) -> PlainTextResponse:
    logger.info("Employee %s not found", exc.employee_id)
    return PlainTextResponse(str(exc), status_code=404)


@router.get("")
def list_employees(request: Request):
    store = get_employee_store(request)
    return [emp.to_dict() for emp in store.list_all()]


@router.post("")
async def create_employee(request: Request):
    body = await _read_body(request)
    if body is None:
        return PlainTextResponse("Invalid JSON body", status_code=400)
    try:
        payload = sanitize_payload(body)
    except ValidationError as exc:
        return _invalid(exc)
    created = get_employee_store(request).create(payload)
    logger.info("Created employee %s", created.id)
    return JSONResponse(created.to_dict(), status_code=201)


@router.put("/")
def update_employee_without_id():
    return _missing_id()


@router.delete("/")
def delete_employee_without_id():
    return _missing_id()


@router.put("/{employee_id}")
async def update_employee(employee_id: str, request: Request):
    employee_id = employee_id.strip()
    if not employee_id:
        return _missing_id()
    body = await _read_body(request)
    if body is None:
        return PlainTextResponse("Invalid JSON body", status_code=400)
    try:
        payload = sanitize_payload(body)
    except ValidationError as exc:
        return _invalid(exc)
    try:
        updated = get_employee_store(request).update(employee_id, payload)
    except EmployeeNotFoundError as exc:
        return _not_found(exc)
    logger.info("Updated employee %s", employee_id)
    return updated.to_dict()


@router.delete("/{employee_id}")
def delete_employee(employee_id: str, request: Request):
    employee_id = employee_id.strip()
    if not employee_id:
        return _missing_id()
    try:
        get_employee_store(request).delete(employee_id)
    except EmployeeNotFoundError as exc:
        return _not_found(exc)
    logger.info("Deleted employee %s", employee_id)
    return Response(status_code=204)
