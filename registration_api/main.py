"""FastAPI application wiring for the account registration API."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .api.routes import router as api_router
from .config import Settings, get_settings
from .domain.service import AccountService, RegistrationService
from .errors import register_exception_handlers
from .logging_config import setup_logging
from .repository import InMemoryDataStore
from .seed import load_seed_data

DESCRIPTION = (
    "A lightweight, demo-friendly Web API that uses static JSON files as its data "
    "source. All data resets when the application restarts."
)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; the store is created and seeded when the lifespan starts."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Seed a fresh in-memory store and attach the services for the app lifecycle."""
        store = InMemoryDataStore()
        load_seed_data(store, settings.seed_data_dir)
        app.state.account_service = AccountService(store)
        app.state.registration_service = RegistrationService(store)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description=DESCRIPTION,
        lifespan=lifespan,
    )

    # CORS for local frontend dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )
    register_exception_handlers(app)

    @app.get("/healthz", tags=["health"])
    def healthz() -> dict[str, str]:
        """Return a minimal readiness indicator used by orchestration systems."""
        return {"status": "ok"}

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(api_router)
    return app


app = create_app()
