"""T1.01 — Fill Style.

First paint SOLID → ``rgba(r, g, b, a)`` with 0-255 channels; anything else
falls back to the configured colour.
"""

from __future__ import annotations

from entitysight.engine.context import GroupContext
from entitysight.engine.registry import Layer, transform
from entitysight.models.scene import Paint
from entitysight.utils.math_helpers import format_number, round_half_up


def rgba_string(paint: Paint) -> str:
    color = paint.color
    channels = [format_number(round_half_up(c * 255)) for c in (color.r, color.g, color.b)]
    alpha = 1.0 if paint.opacity is None else paint.opacity
    return "rgba({}, {}, {}, {})".format(*channels, format_number(alpha))


def fill_style(fills: list[Paint] | None, fallback: str) -> str:
    if fills and fills[0].type == "SOLID":
        return rgba_string(fills[0])
    return fallback


@transform(
    id="T1.01",
    layer=Layer.STYLING,
    description="Resolve each child's fillStyle",
)
def fill_style_resolution(ctx: GroupContext) -> None:
    for shape in ctx.shapes:
        shape.fill_style = fill_style(shape.node.fills, ctx.config.fallback_fill)
