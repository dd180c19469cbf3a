"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from entitysight.report.store import ArtifactStore


def get_store(request: Request) -> ArtifactStore:
    return request.app.state.store
