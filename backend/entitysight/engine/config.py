"""Report configuration — output constants and placement behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from entitysight.config import Settings


@dataclass
class ReportConfig:
    """Controls how placements are resolved and how numbers are printed."""

    # Emitted verbatim on every shape entry of the config block
    scale_factor: float = 3.5

    # fillStyle for shapes without a solid first fill
    fallback_fill: str = "#2D2D2D"

    # Decimals kept when printing (toFixed semantics)
    origin_digits: int = 3
    rotation_digits: int = 4
    outline_digits: int = 3

    # Groups are assumed axis-aligned unless enabled
    use_group_rotation: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> ReportConfig:
        return cls(
            scale_factor=settings.entitysight_scale_factor,
            fallback_fill=settings.entitysight_fallback_fill,
            use_group_rotation=settings.entitysight_use_group_rotation,
        )
