"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from entitysight.models.artifacts import CopyCommand
from entitysight.models.scene import SceneNode


class SelectionChangedRequest(BaseModel):
    selection: list[SceneNode] = Field(
        default_factory=list,
        description="Currently selected top-level nodes, in selection order",
    )


class UiMessageRequest(BaseModel):
    type: CopyCommand = Field(..., description="Which artifact to copy to the clipboard")
