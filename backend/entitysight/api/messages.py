"""POST /api/message — UI commands forwarded by the host (clipboard copies)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from entitysight.dependencies import get_store
from entitysight.models.artifacts import CopyMessage
from entitysight.models.requests import UiMessageRequest
from entitysight.report.store import ArtifactStore

router = APIRouter()


@router.post("/message", response_model=CopyMessage)
def ui_message(
    req: UiMessageRequest,
    store: ArtifactStore = Depends(get_store),
) -> CopyMessage:
    reply = store.handle_message(req.type)
    if reply is None:
        raise HTTPException(status_code=400, detail=f"Unsupported message type: {req.type}")
    return reply
