"""GroupContext — the mutable state object flowing through all transforms.

Per-shape results → ShapeData
Per-group results → GroupContext.* (tally, origin, rotation)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from entitysight.engine.config import ReportConfig
from entitysight.models.scene import SceneNode
from entitysight.svg.path_parser import Coordinate
from entitysight.utils.geometry import GlobalPlacement

# Node kind tag → ShapeTally counter
SHAPE_KINDS: dict[str, str] = {
    "RECTANGLE": "rectangles",
    "ELLIPSE": "ellipses",
    "POLYGON": "polygons",
    "STAR": "stars",
    "LINE": "lines",
    "VECTOR": "vectors",
}

CORE_NAME = "core"


def lowercase_first_letter(name: str) -> str:
    if not name:
        return name
    return name[0].lower() + name[1:]


@dataclass
class ShapeTally:
    """Shape counts for one group."""

    rectangles: int = 0
    ellipses: int = 0
    polygons: int = 0
    stars: int = 0
    lines: int = 0
    vectors: int = 0
    cores: int = 0

    def count(self, kind: str, name: str) -> None:
        """Tally one shape. Unknown kinds only count toward ``cores`` if named so."""
        attr = SHAPE_KINDS.get(kind)
        if attr is not None:
            setattr(self, attr, getattr(self, attr) + 1)
        if name and name.lower() == CORE_NAME:
            self.cores += 1

    @property
    def total(self) -> int:
        return (
            self.rectangles
            + self.ellipses
            + self.polygons
            + self.stars
            + self.lines
            + self.vectors
            + self.cores
        )


@dataclass
class ShapeData:
    """One child of the group and everything derived from it."""

    node: SceneNode
    name: str
    placement: GlobalPlacement | None = None
    fill_style: str = ""
    outline: list[Coordinate] = field(default_factory=list)

    @property
    def kind(self) -> str:
        return self.node.type


@dataclass
class GroupContext:
    """Shared state for one group's report pass."""

    group: SceneNode
    name: str
    config: ReportConfig = field(default_factory=ReportConfig)
    shapes: list[ShapeData] = field(default_factory=list)
    tally: ShapeTally = field(default_factory=ShapeTally)
    # Parent frame for child placement
    origin: Coordinate = Coordinate(0.0, 0.0)
    rotation: float = 0.0

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_group(cls, group: SceneNode, config: ReportConfig | None = None) -> GroupContext:
        return cls(
            group=group,
            name=lowercase_first_letter(group.name),
            config=config or ReportConfig(),
            shapes=[ShapeData(node=child, name=lowercase_first_letter(child.name)) for child in group.children],
            origin=Coordinate(group.x, group.y),
        )

    @property
    def num_shapes(self) -> int:
        return len(self.shapes)

    def get_shape(self, name: str) -> ShapeData | None:
        for shape in self.shapes:
            if shape.name == name:
                return shape
        return None
