"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from entitysight.config import settings
from entitysight.engine.config import ReportConfig
from entitysight.engine.registry import load_transforms
from entitysight.report.store import ArtifactStore

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.entitysight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

VERSION = "0.1.0"


def create_app() -> FastAPI:
    app = FastAPI(
        title="EntitySight",
        description="Group selection → entity config, outline data and shape summary",
        version=VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    load_transforms()

    # Plugin-load run: nothing selected yet
    store = ArtifactStore(ReportConfig.from_settings(settings))
    store.refresh([])
    app.state.store = store

    from entitysight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
