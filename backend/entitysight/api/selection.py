"""POST /api/selection — selection-changed event; GET /api/artifacts — latest run."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from entitysight.dependencies import get_store
from entitysight.models.requests import SelectionChangedRequest
from entitysight.models.responses import ReportResponse
from entitysight.report.store import ArtifactStore

router = APIRouter()


@router.post("/selection", response_model=ReportResponse, response_model_by_alias=True)
def selection_changed(
    req: SelectionChangedRequest,
    store: ArtifactStore = Depends(get_store),
) -> ReportResponse:
    start = time.perf_counter()
    artifacts = store.refresh(req.selection)
    elapsed = (time.perf_counter() - start) * 1000
    return ReportResponse.from_artifacts(artifacts, elapsed)


@router.get("/artifacts", response_model=ReportResponse, response_model_by_alias=True)
def current_artifacts(store: ArtifactStore = Depends(get_store)) -> ReportResponse:
    return ReportResponse.from_artifacts(store.current)
