"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from entitysight.svg.path_parser import Coordinate
from entitysight.utils.math_helpers import format_number


@dataclass(frozen=True)
class GlobalPlacement:
    """A shape's placement in the group's parent frame."""

    position: Coordinate
    rotation: float
    flipped_horizontally: bool


def as_matrix(transform: Sequence[Sequence[float]]) -> NDArray[np.float64]:
    """2x3 affine matrix ``[[a, c, tx], [b, d, ty]]`` as a float array."""
    m = np.asarray(transform, dtype=np.float64)
    if m.shape != (2, 3):
        raise ValueError(f"Expected a 2x3 affine matrix, got shape {m.shape}")
    return m


def rotation_matrix(theta: float) -> NDArray[np.float64]:
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s], [s, c]])


def convert_to_global(origin: Coordinate, local: Coordinate, parent_rotation: float = 0.0) -> Coordinate:
    """Rotate ``local`` by the parent rotation and translate by the parent origin."""
    rotated = rotation_matrix(parent_rotation) @ np.array([local.x, local.y])
    return Coordinate(float(origin.x + rotated[0]), float(origin.y + rotated[1]))


def matrix_rotation(transform: Sequence[Sequence[float]]) -> float:
    """Rotation angle (radians) encoded in an affine matrix: atan2(b, a)."""
    m = as_matrix(transform)
    return float(np.arctan2(m[1, 0], m[0, 0]))


def is_flipped_horizontally(transform: Sequence[Sequence[float]]) -> bool:
    return bool(as_matrix(transform)[0, 0] < 0)


def resolve_placement(
    origin: Coordinate,
    local: Coordinate,
    transform: Sequence[Sequence[float]],
    parent_rotation: float = 0.0,
) -> GlobalPlacement:
    """Global position, own rotation and flip flag for one shape."""
    return GlobalPlacement(
        position=convert_to_global(origin, local, parent_rotation),
        rotation=matrix_rotation(transform),
        flipped_horizontally=is_flipped_horizontally(transform),
    )


def coordinate_key(coord: Coordinate) -> tuple[str, str]:
    """Exact-value identity of a point as it would be printed unrounded."""
    return (format_number(coord.x), format_number(coord.y))


def dedupe_coordinates(*paths: Iterable[Coordinate]) -> list[Coordinate]:
    """Distinct points across all paths, first occurrence wins."""
    seen: set[tuple[str, str]] = set()
    unique: list[Coordinate] = []
    for path in paths:
        for coord in path:
            key = coordinate_key(coord)
            if key in seen:
                continue
            seen.add(key)
            unique.append(coord)
    return unique
