"""T0.03 — Outline Extraction.

Parse every vector path of a child and keep each distinct point once, in
first-seen order across all of its sub-paths. Children without path data get
an empty outline.
"""

from __future__ import annotations

import logging

from entitysight.engine.context import GroupContext
from entitysight.engine.registry import Layer, transform
from entitysight.svg.path_parser import extract_coordinates
from entitysight.utils.geometry import dedupe_coordinates

logger = logging.getLogger(__name__)


@transform(
    id="T0.03",
    layer=Layer.EXTRACTION,
    description="Extract deduplicated outline points from vector paths",
)
def outline_extraction(ctx: GroupContext) -> None:
    for shape in ctx.shapes:
        paths = shape.node.vector_paths or []
        shape.outline = dedupe_coordinates(*(extract_coordinates(p.data) for p in paths))
        if paths:
            logger.debug("%s: %d paths -> %d points", shape.name, len(paths), len(shape.outline))
