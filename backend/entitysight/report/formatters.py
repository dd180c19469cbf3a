"""GroupContext → artifact text.

One builder per artifact. Builders only collect finished group contexts;
text is produced by ``render()`` so each format can be tested on its own.
"""

from __future__ import annotations

import math

from entitysight.engine.config import ReportConfig
from entitysight.engine.context import GroupContext, ShapeData, ShapeTally
from entitysight.svg.path_parser import Coordinate
from entitysight.utils.geometry import GlobalPlacement
from entitysight.utils.math_helpers import format_fixed, format_number

_INDENT = "    "

_HIGHLIGHT = "<span style='color: red;'>{}</span>"
_BREAK = " </br>"

# Counter → label, in display order. Vectors are not highlighted.
_INFO_LINES: list[tuple[str, str, bool]] = [
    ("rectangles", "Rectangles", True),
    ("ellipses", "Ellipses", True),
    ("polygons", "Polygons", True),
    ("stars", "Stars", True),
    ("lines", "Lines", True),
    ("vectors", "Vectors", False),
]

_UNRESOLVED = GlobalPlacement(Coordinate(math.nan, math.nan), 0.0, False)


def _comma_lines(items: list[str]) -> str:
    """Items on their own lines, comma after every item but the last."""
    return "".join(f"{item}{',' if i < len(items) - 1 else ''}\n" for i, item in enumerate(items))


class _Builder:
    def __init__(self, config: ReportConfig | None = None) -> None:
        self.config = config or ReportConfig()
        self.groups: list[GroupContext] = []

    def add(self, ctx: GroupContext) -> None:
        self.groups.append(ctx)

    def render(self) -> str:
        return "".join(self.render_group(ctx) for ctx in self.groups)

    def render_group(self, ctx: GroupContext) -> str:
        raise NotImplementedError


class InfoBuilder(_Builder):
    """HTML-ish shape count summary."""

    def render_group(self, ctx: GroupContext) -> str:
        return f"Entity: {ctx.name}{_BREAK}" + tally_summary(ctx.tally)


def tally_summary(tally: ShapeTally) -> str:
    out = ""
    for attr, label, highlight in _INFO_LINES:
        n = getattr(tally, attr)
        if n > 0:
            out += f"{label}: {_HIGHLIGHT.format(n) if highlight else n}{_BREAK}"
    cores = tally.cores if tally.cores > 0 else _HIGHLIGHT.format(0)
    out += f"Core: {cores}{_BREAK}"
    out += f"Total: {tally.total}</br>"
    return out


class ConfigBuilder(_Builder):
    """``const <group> = {...}; export default <group>;`` blocks."""

    def render_group(self, ctx: GroupContext) -> str:
        body = _comma_lines([self.shape_entry(shape) for shape in ctx.shapes])
        return f"const {ctx.name} = {{\n{body}}};\nexport default {ctx.name};\n"

    def shape_entry(self, shape: ShapeData) -> str:
        cfg = self.config
        placement = shape.placement or _UNRESOLVED
        pad = _INDENT * 2

        lines = [
            f"{_INDENT}{shape.name}: {{",
            f"{pad}scaleFactor: {format_number(cfg.scale_factor)},",
            f"{pad}origin: {{ x: {format_fixed(placement.position.x, cfg.origin_digits)}, "
            f"y: {format_fixed(placement.position.y, cfg.origin_digits)} }},",
        ]
        if placement.rotation != 0:
            lines.append(f"{pad}rotation: {format_fixed(placement.rotation, cfg.rotation_digits)},")
        lines.append(f"{pad}offset: {{ x: 0, y: 0 }},")
        if placement.flipped_horizontally:
            lines.append(f"{pad}scaleY: -1,")
        lines.append(f"{pad}fillStyle: '{shape.fill_style or cfg.fallback_fill}'")
        lines.append(f"{_INDENT}}}")
        return "\n".join(lines)


class DataBuilder(_Builder):
    """JSON-like outline dump, one top-level object per group."""

    def render_group(self, ctx: GroupContext) -> str:
        body = _comma_lines([self.shape_entry(shape) for shape in ctx.shapes])
        return f'{{\n{_INDENT}"{ctx.name}": {{\n{body}{_INDENT}}}\n}}\n'

    def shape_entry(self, shape: ShapeData) -> str:
        digits = self.config.outline_digits
        points = _comma_lines([
            f'{_INDENT * 3}{{ "x": {format_fixed(pt.x, digits)}, "y": {format_fixed(pt.y, digits)} }}'
            for pt in shape.outline
        ])
        return f'{_INDENT * 2}"{shape.name}": [\n{points}{_INDENT * 2}]'
