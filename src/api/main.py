"""
FastAPI app: contact page, add/delete endpoints returning HTML fragments (htmx).
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import time
from pathlib import Path

from api.config import Settings, load_env

load_env()

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from api.rendering import render_fragments
from contactbook.application import (
    ContactAdded,
    ContactDeleted,
    ContactRepository,
    ContactService,
    DuplicateEmail,
    PageView,
)
from contactbook.infrastructure import InMemoryContactRegistry, seed_registry

_SETTINGS = Settings.from_env()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=_SETTINGS.log_level,
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _html(result: PageView | ContactAdded | DuplicateEmail) -> HTMLResponse:
    return HTMLResponse(
        content=render_fragments(result.fragments),
        status_code=result.status_code,
    )


def _service(request: Request) -> ContactService:
    return request.app.state.service


def create_app(
    registry: ContactRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the app around one registry. A fresh registry is seeded when settings.seed is set."""
    settings = settings or _SETTINGS
    if registry is None:
        registry = InMemoryContactRegistry()
        if settings.seed:
            seeded = seed_registry(registry)
            logger.info("Seeded %d contacts", len(seeded))

    app = FastAPI(title="Contactbook")
    app.state.service = ContactService(registry)

    app.mount("/images", StaticFiles(directory=STATIC_DIR / "images"), name="images")
    app.mount("/css", StaticFiles(directory=STATIC_DIR / "css"), name="css")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    # --- REST: health ---

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # --- Pages and fragments ---

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return _html(_service(request).render_page())

    @app.post("/contacts", response_class=HTMLResponse)
    def create_contact(
        request: Request,
        name: str = Form(""),
        email: str = Form(""),
    ):
        result = _service(request).add_contact(name, email)
        return _html(result)

    @app.delete("/contacts/{contact_id}")
    def delete_contact(contact_id: str, request: Request):
        result = _service(request).delete_contact(contact_id)
        if isinstance(result, ContactDeleted):
            return Response(status_code=result.status_code)
        return PlainTextResponse(result.message, status_code=result.status_code)

    return app


app = create_app()
