"""T0.01 — Shape Tally.

Count the group's children per geometric kind, plus children named "core".
Kinds outside the known set only reach the totals through the core counter.
"""

from __future__ import annotations

from entitysight.engine.context import GroupContext
from entitysight.engine.registry import Layer, transform


@transform(
    id="T0.01",
    layer=Layer.EXTRACTION,
    description="Tally children by kind and core name",
)
def shape_tally(ctx: GroupContext) -> None:
    for shape in ctx.shapes:
        ctx.tally.count(shape.kind, shape.node.name)
