"""Selection → Artifacts.

Every call reprocesses the whole selection from scratch: one pipeline pass
per GROUP node (other nodes are ignored), then the three builders render.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from entitysight.engine.config import ReportConfig
from entitysight.engine.context import GroupContext
from entitysight.engine.pipeline import Pipeline, create_pipeline
from entitysight.models.artifacts import Artifacts
from entitysight.models.scene import SceneNode
from entitysight.report.formatters import ConfigBuilder, DataBuilder, InfoBuilder

logger = logging.getLogger(__name__)

EMPTY_SELECTION_INFO = "Sélectionner une entité. (groupe)"
EMPTY_SELECTION_PLACEHOLDER = "_"
NOT_A_GROUP_INFO = "Cette sélection n'est pas un groupe."


def empty_selection_artifacts() -> Artifacts:
    return Artifacts(
        entity_info=EMPTY_SELECTION_INFO,
        entity_config=EMPTY_SELECTION_PLACEHOLDER,
        entity_data=EMPTY_SELECTION_PLACEHOLDER,
    )


def build_group_context(group: SceneNode, config: ReportConfig, pipeline: Pipeline) -> GroupContext:
    ctx = GroupContext.from_group(group, config)
    pipeline.run(ctx)
    if ctx.errors:
        logger.warning("Group %r finished with errors: %s", ctx.name, ctx.errors)
    return ctx


def assemble_report(
    selection: Sequence[SceneNode],
    config: ReportConfig | None = None,
    pipeline: Pipeline | None = None,
) -> Artifacts:
    """Run the full report for the current selection."""
    if not selection:
        return empty_selection_artifacts()

    config = config or ReportConfig()
    pipeline = pipeline or create_pipeline()

    info = InfoBuilder(config)
    entity_config = ConfigBuilder(config)
    data = DataBuilder(config)
    shape_count = 0

    for node in selection:
        if not node.is_group:
            logger.debug("Ignoring non-group node %r (%s)", node.name, node.type)
            continue
        ctx = build_group_context(node, config, pipeline)
        for builder in (info, entity_config, data):
            builder.add(ctx)
        shape_count += ctx.num_shapes

    entity_info = info.render() or NOT_A_GROUP_INFO

    logger.info("Report: %d groups, %d shapes", len(info.groups), shape_count)
    return Artifacts(
        entity_info=entity_info,
        entity_config=entity_config.render(),
        entity_data=data.render(),
        group_count=len(info.groups),
        shape_count=shape_count,
    )
