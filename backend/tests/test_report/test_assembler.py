"""End-to-end report tests: selection in, three artifacts out."""

from entitysight.engine.config import ReportConfig
from entitysight.report.assembler import (
    EMPTY_SELECTION_INFO,
    NOT_A_GROUP_INFO,
    assemble_report,
)
from tests.conftest import (
    PLAYER_CONFIG,
    PLAYER_DATA,
    PLAYER_INFO,
    TURRET_CONFIG,
    TURRET_DATA,
    TURRET_INFO,
    scene,
)


def test_empty_selection_placeholders():
    artifacts = assemble_report([])
    assert artifacts.entity_info == EMPTY_SELECTION_INFO
    assert artifacts.entity_info == "Sélectionner une entité. (groupe)"
    assert artifacts.entity_config == "_"
    assert artifacts.entity_data == "_"


def test_selection_without_groups(stray_rectangle):
    artifacts = assemble_report([stray_rectangle])
    assert artifacts.entity_info == NOT_A_GROUP_INFO
    assert artifacts.entity_config == ""
    assert artifacts.entity_data == ""
    assert artifacts.group_count == 0


def test_player_group(player_group):
    artifacts = assemble_report([player_group])
    assert artifacts.entity_config == PLAYER_CONFIG
    assert artifacts.entity_data == PLAYER_DATA
    assert artifacts.entity_info == PLAYER_INFO
    assert artifacts.group_count == 1
    assert artifacts.shape_count == 2


def test_turret_group(turret_group):
    artifacts = assemble_report([turret_group])
    assert artifacts.entity_config == TURRET_CONFIG
    assert artifacts.entity_data == TURRET_DATA
    assert artifacts.entity_info == TURRET_INFO


def test_groups_are_reported_in_selection_order(player_group, turret_group, stray_rectangle):
    artifacts = assemble_report([turret_group, stray_rectangle, player_group])
    assert artifacts.entity_config == TURRET_CONFIG + PLAYER_CONFIG
    assert artifacts.entity_data == TURRET_DATA + PLAYER_DATA
    assert artifacts.entity_info == TURRET_INFO + PLAYER_INFO
    assert artifacts.group_count == 2
    assert artifacts.shape_count == 4


def test_rerun_gives_identical_artifacts(player_group):
    assert assemble_report([player_group]) == assemble_report([player_group])


def test_fallback_fill_from_config(player_group):
    artifacts = assemble_report([player_group], ReportConfig(fallback_fill="#000000"))
    assert "fillStyle: '#000000'" in artifacts.entity_config


def test_unknown_child_kind_still_listed():
    group = scene({
        "type": "GROUP",
        "name": "Sign",
        "children": [{"type": "TEXT", "name": "Label", "x": 1, "y": 2}],
    })
    artifacts = assemble_report([group])
    assert "    label: {" in artifacts.entity_config
    assert '"label": [' in artifacts.entity_data
    assert artifacts.entity_info.endswith("Total: 0</br>")


def test_huge_coordinates_are_printed_not_raised():
    group = scene({
        "type": "GROUP",
        "name": "Far",
        "x": 1e26,
        "children": [
            {"type": "VECTOR", "name": "Edge", "vectorPaths": [{"data": "M 1e30 0 L 1 1 Z"}]},
        ],
    })
    artifacts = assemble_report([group])
    assert "origin: { x: 1e+26, y: 0 }" in artifacts.entity_config
    assert '{ "x": 1e+30, "y": 0 },' in artifacts.entity_data
