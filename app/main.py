"""Dual-coding EMR core FastAPI application.

Backend for recording diagnoses against paired NAMASTE (traditional medicine)
and ICD-11 codes. Terminology lookups go to an external registry with a bundled
fallback corpus; diagnoses are written to the problem list and mirrored to the
registry on a best-effort basis.

Dashboards, analytics and exports are not part of this service.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.clinical.terminology.client import TerminologyClient
from app.core.config import Settings, settings
from app.core.identity import DEMO_PRINCIPALS, IdentityResolver, StaticIdentityResolver
from app.routers import diagnoses, terminology


def create_app(
    app_settings: Settings | None = None,
    *,
    terminology_client: TerminologyClient | None = None,
    identity_resolver: IdentityResolver | None = None,
) -> FastAPI:
    app_settings = app_settings or settings
    logging.basicConfig(
        level=app_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned_client = terminology_client is None
        app.state.terminology_client = terminology_client or TerminologyClient(app_settings)
        app.state.identity_resolver = identity_resolver or StaticIdentityResolver(DEMO_PRINCIPALS)
        try:
            yield
        finally:
            if owned_client:
                await app.state.terminology_client.aclose()

    app = FastAPI(
        title="NAMASTE EMR Core",
        version="0.1.0",
        description="Dual-coded (NAMASTE + ICD-11) diagnosis search and recording.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(terminology.router)
    app.include_router(diagnoses.router)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {
            "status": "ok",
            "registry_configured": app_settings.terminology_registry_configured,
        }

    return app


app = create_app()
