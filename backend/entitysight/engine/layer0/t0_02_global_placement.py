"""T0.02 — Global Placement.

Resolve each child's local offset against the group origin and read its own
rotation and horizontal flip off its relative transform. The group is treated
as axis-aligned unless ``use_group_rotation`` is set, in which case its
rotation comes from its own transform the same way.
"""

from __future__ import annotations

from entitysight.engine.context import GroupContext
from entitysight.engine.registry import Layer, transform
from entitysight.svg.path_parser import Coordinate
from entitysight.utils.geometry import matrix_rotation, resolve_placement


@transform(
    id="T0.02",
    layer=Layer.EXTRACTION,
    description="Resolve child placement in the group's parent frame",
)
def global_placement(ctx: GroupContext) -> None:
    if ctx.config.use_group_rotation:
        ctx.rotation = matrix_rotation(ctx.group.relative_transform)
    else:
        ctx.rotation = 0.0

    for shape in ctx.shapes:
        node = shape.node
        shape.placement = resolve_placement(
            ctx.origin,
            Coordinate(node.x, node.y),
            node.relative_transform,
            parent_rotation=ctx.rotation,
        )
