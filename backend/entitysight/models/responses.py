"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from entitysight.models.artifacts import Artifacts


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class ReportResponse(BaseModel):
    artifacts: Artifacts
    messages: list[dict[str, str]] = Field(default_factory=list)
    processing_time_ms: float = 0.0

    @classmethod
    def from_artifacts(cls, artifacts: Artifacts, elapsed_ms: float = 0.0) -> ReportResponse:
        return cls(
            artifacts=artifacts,
            messages=artifacts.messages(),
            processing_time_ms=round(elapsed_ms, 1),
        )
