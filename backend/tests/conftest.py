"""Shared test fixtures."""

from __future__ import annotations

import copy

import pytest

from entitysight.models.scene import SceneNode


# Selection payloads in the host's own shape (camelCase keys)

IDENTITY = [[1, 0, 0], [0, 1, 0]]
ROTATED_90 = [[0, -1, 0], [1, 0, 0]]
FLIPPED = [[-1, 0, 0], [0, 1, 0]]

PLAYER_GROUP = {
    "type": "GROUP",
    "name": "Player",
    "x": 10,
    "y": 20,
    "children": [
        {
            "type": "RECTANGLE",
            "name": "Body",
            "x": 5,
            "y": 5,
            "relativeTransform": IDENTITY,
            "fills": [{"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0}}],
        },
        {
            "type": "VECTOR",
            "name": "Arm",
            "x": 0,
            "y": 0,
            "relativeTransform": IDENTITY,
            "vectorPaths": [{"windingRule": "NONZERO", "data": "M0,0 L10,10 Z"}],
        },
    ],
}

PLAYER_CONFIG = """const player = {
    body: {
        scaleFactor: 3.5,
        origin: { x: 15, y: 25 },
        offset: { x: 0, y: 0 },
        fillStyle: 'rgba(255, 0, 0, 1)'
    },
    arm: {
        scaleFactor: 3.5,
        origin: { x: 10, y: 20 },
        offset: { x: 0, y: 0 },
        fillStyle: '#2D2D2D'
    }
};
export default player;
"""

PLAYER_DATA = """{
    "player": {
        "body": [
        ],
        "arm": [
            { "x": 0, "y": 0 },
            { "x": 10, "y": 10 }
        ]
    }
}
"""

PLAYER_INFO = (
    "Entity: player </br>"
    "Rectangles: <span style='color: red;'>1</span> </br>"
    "Vectors: 1 </br>"
    "Core: <span style='color: red;'>0</span> </br>"
    "Total: 2</br>"
)

# Rotated, flipped, translucent and core-named children
TURRET_GROUP = {
    "type": "GROUP",
    "name": "Turret",
    "x": 0,
    "y": 0,
    "children": [
        {
            "type": "ELLIPSE",
            "name": "Core",
            "x": 1.23456,
            "y": 2,
            "relativeTransform": ROTATED_90,
            "fills": [{"type": "SOLID", "color": {"r": 0.5, "g": 0.5, "b": 0.5}, "opacity": 0.5}],
        },
        {
            "type": "STAR",
            "name": "Barrel",
            "x": -3,
            "y": 4,
            "relativeTransform": FLIPPED,
            "fills": [{"type": "GRADIENT_LINEAR"}],
            "vectorPaths": [
                {"data": "M 0 0 C 1 1 2 2 3 3 Z"},
                {"data": "M 3 3 L 0 0 L 4.00049 1 Z"},
            ],
        },
    ],
}

TURRET_CONFIG = """const turret = {
    core: {
        scaleFactor: 3.5,
        origin: { x: 1.235, y: 2 },
        rotation: 1.5708,
        offset: { x: 0, y: 0 },
        fillStyle: 'rgba(128, 128, 128, 0.5)'
    },
    barrel: {
        scaleFactor: 3.5,
        origin: { x: -3, y: 4 },
        rotation: 3.1416,
        offset: { x: 0, y: 0 },
        scaleY: -1,
        fillStyle: '#2D2D2D'
    }
};
export default turret;
"""

TURRET_DATA = """{
    "turret": {
        "core": [
        ],
        "barrel": [
            { "x": 0, "y": 0 },
            { "x": 1, "y": 1 },
            { "x": 2, "y": 2 },
            { "x": 3, "y": 3 },
            { "x": 4, "y": 1 }
        ]
    }
}
"""

TURRET_INFO = (
    "Entity: turret </br>"
    "Ellipses: <span style='color: red;'>1</span> </br>"
    "Stars: <span style='color: red;'>1</span> </br>"
    "Core: 1 </br>"
    "Total: 3</br>"
)

STRAY_RECTANGLE = {"type": "RECTANGLE", "name": "Loose", "x": 0, "y": 0}


def payload(node: dict) -> dict:
    return copy.deepcopy(node)


def scene(node: dict) -> SceneNode:
    return SceneNode.model_validate(payload(node))


@pytest.fixture
def player_group() -> SceneNode:
    return scene(PLAYER_GROUP)


@pytest.fixture
def turret_group() -> SceneNode:
    return scene(TURRET_GROUP)


@pytest.fixture
def stray_rectangle() -> SceneNode:
    return scene(STRAY_RECTANGLE)
