"""EntitySight per-group report engine."""

from entitysight.engine.registry import transform, Layer, get_registry, load_transforms
from entitysight.engine.context import GroupContext, ShapeData, ShapeTally
from entitysight.engine.pipeline import Pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "load_transforms",
    "GroupContext",
    "ShapeData",
    "ShapeTally",
    "Pipeline",
]
