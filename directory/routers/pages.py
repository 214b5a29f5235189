from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from directory.repositories.json_storage import EmployeeStore
from directory.routers.employees import get_employee_store

router = APIRouter(prefix="", tags=["pages"])
logger = logging.getLogger(__name__)


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def _load_employees(store: EmployeeStore) -> list[dict]:
    # Any load failure renders an empty list instead of an error page
    try:
        return [emp.to_dict() for emp in store.list_all()]
    except Exception:
        logger.exception("Could not load employees from %s", store.data_file)
        return []


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    employees = _load_employees(get_employee_store(request))
    templates = _templates(request)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "employees": employees,
            "css_href": request.app.state.css_href,
        },
    )


# Silences Chrome devtools probes (avoids noisy 404s in the logs)
@router.get("/.well-known/appspecific/com.chrome.devtools.json")
def chrome_devtools_wellknown():
    return PlainTextResponse("", status_code=204)
