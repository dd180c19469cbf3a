"""Pipeline orchestrator — runs a group's transforms in dependency order."""

from __future__ import annotations

import logging
import time

from entitysight.engine.context import GroupContext
from entitysight.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry, load_transforms

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the per-group transform pipeline."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: GroupContext) -> GroupContext:
        """Run every registered transform on the given group."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        logger.info("Pipeline: %d transforms queued for group %r", len(ordered), ctx.name)

        for spec in ordered:
            self._run_one(spec, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.1fms (%d shapes)",
            len(ctx.completed_transforms),
            len(ordered),
            total,
            ctx.num_shapes,
        )
        return ctx

    def run_layer(self, ctx: GroupContext, layer: Layer) -> GroupContext:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            self._run_one(spec, ctx)
        return ctx

    def _run_one(self, spec: TransformSpec, ctx: GroupContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
            ctx.completed_transforms.add(spec.id)
            logger.debug("  %s completed in %.2fms", spec.id, (time.perf_counter() - t0) * 1000)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)


def create_pipeline() -> Pipeline:
    """Pipeline over the global registry, with every transform module loaded."""
    load_transforms()
    return Pipeline()
