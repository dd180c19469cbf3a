"""Scene graph supplied by the host — selected nodes and their attributes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

IDENTITY_TRANSFORM: list[list[float]] = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]


class HostModel(BaseModel):
    """Accepts the host's camelCase keys as well as snake_case."""

    model_config = ConfigDict(populate_by_name=True)


class RGB(HostModel):
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


class Paint(HostModel):
    type: str = "SOLID"
    color: RGB = Field(default_factory=RGB)
    opacity: float | None = None


class VectorPath(HostModel):
    data: str = ""
    winding_rule: str = Field(default="NONZERO", alias="windingRule")


class SceneNode(HostModel):
    id: str = ""
    type: str = Field(..., description="Node kind tag, e.g. GROUP, RECTANGLE, VECTOR")
    name: str = ""
    x: float = 0.0
    y: float = 0.0
    relative_transform: list[list[float]] = Field(
        default_factory=lambda: [row[:] for row in IDENTITY_TRANSFORM],
        alias="relativeTransform",
        min_length=2,
        max_length=2,
    )
    fills: list[Paint] | None = None
    vector_paths: list[VectorPath] | None = Field(default=None, alias="vectorPaths")
    children: list[SceneNode] = Field(default_factory=list)

    @field_validator("relative_transform")
    @classmethod
    def _affine_rows(cls, rows: list[list[float]]) -> list[list[float]]:
        if any(len(row) != 3 for row in rows):
            raise ValueError("relativeTransform must be [[a, c, tx], [b, d, ty]]")
        return rows

    @property
    def is_group(self) -> bool:
        return self.type == "GROUP"
