"""Transform registry — each report step is a plain function registered via decorator.

Usage:
    @transform(id="T0.02", layer=Layer.EXTRACTION, dependencies=["T0.01"])
    def global_placement(ctx: GroupContext) -> None:
        for shape in ctx.shapes:
            shape.placement = resolve(...)

Adding a step = one new module under ``layer0``/``layer1`` with the decorator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from entitysight.engine.context import GroupContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    EXTRACTION = 0
    STYLING = 1


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["GroupContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Registry of report transforms keyed by ID."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted((s for s in self._transforms.values() if s.layer == layer), key=lambda s: s.id)

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[TransformSpec]:
        """Dependency-respecting order, ties broken by ID. None means every transform."""
        pool = self._transforms
        if requested_ids is not None:
            wanted: set[str] = set()
            stack = list(requested_ids)
            while stack:
                tid = stack.pop()
                if tid in wanted or tid not in pool:
                    continue
                wanted.add(tid)
                stack.extend(pool[tid].dependencies)
            pool = {tid: spec for tid, spec in pool.items() if tid in wanted}

        pending = {tid: {d for d in spec.dependencies if d in pool} for tid, spec in pool.items()}
        ordered: list[TransformSpec] = []

        while pending:
            ready = sorted(tid for tid, deps in pending.items() if not deps)
            if not ready:
                raise ValueError(f"Circular dependency detected among: {set(pending)}")
            tid = ready[0]
            ordered.append(pool[tid])
            del pending[tid]
            for deps in pending.values():
                deps.discard(tid)

        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def load_transforms() -> None:
    """Import every transform module so the @transform decorators fire."""
    import importlib
    import pkgutil

    for layer in Layer:
        package_name = f"entitysight.engine.layer{int(layer)}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: Callable[["GroupContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
