import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from directory.core.config import Settings, get_settings
from directory.core.log import configure_logging
from directory.repositories.json_storage import EmployeeStore
from directory.routers import employees as employees_router
from directory.routers import pages as pages_router

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "..", "web")
TEMPLATES = os.path.join(BASE, "..", "templates")
DEV_ORIGINS = {
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
}


PAGE_CSP = "; ".join(
    [
        "default-src 'self'",
        "style-src 'self' 'unsafe-inline'",
        "script-src 'self' 'unsafe-inline'",
        "connect-src 'self'",
    ]
)


def security_headers(settings: Settings) -> dict[str, str]:
    headers = {
        "Content-Security-Policy": PAGE_CSP,
        "X-Frame-Options": "DENY",
        "X-Content-Type-Options": "nosniff",
        "Referrer-Policy": "same-origin",
    }
    if settings.app_env == "prod":
        headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    return headers


class HeaderDefaultsMiddleware(BaseHTTPMiddleware):
    """Add fixed headers to every response unless a route already set them."""

    def __init__(self, app, *, headers: dict[str, str]) -> None:
        super().__init__(app)
        self.headers = headers

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn; tests pass their own Settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Employee Directory")
    app.mount("/static", StaticFiles(directory=WEB), name="static")
    app.state.templates = Jinja2Templates(directory=TEMPLATES)
    app.state.css_href = "/static/directory.css"
    app.state.settings = settings
    app.state.employee_store = EmployeeStore(settings.data_file)

    allowed_cors = {settings.public_base_url}
    if settings.app_env != "prod":
        allowed_cors.update(DEV_ORIGINS)
    allowed_cors = {origin for origin in allowed_cors if origin}
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(HeaderDefaultsMiddleware, headers=security_headers(settings))

    app.include_router(employees_router.router)
    app.include_router(pages_router.router)
    return app


app = create_app()
