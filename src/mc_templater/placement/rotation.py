"""Tile data remapping for blocks whose data value encodes a facing.

Templates are authored facing north. Each table maps the authored tile data
to the tile data the block needs when the template is built facing another
direction: ``table[tile_data][direction] -> tile_data``.
"""

from typing import Dict, Mapping

from mc_templater.constants import DEFAULT_TILE_DATA, DIRECTION, ORIENTABLE_KIND
from mc_templater.util.logging import get_logger

logger = get_logger(__name__)

RotationTable = Mapping[str, Mapping[DIRECTION, str]]

N, S, E, W = DIRECTION.NORTH, DIRECTION.SOUTH, DIRECTION.EAST, DIRECTION.WEST

STAIRS_ROTATION: RotationTable = {
    "0": {W: "2", E: "3", N: "0", S: "1"},
    "1": {W: "3", E: "2", N: "1", S: "0"},
    "2": {W: "0", E: "1", N: "2", S: "3"},
    "3": {W: "1", E: "0", N: "3", S: "2"},
}

BED_ROTATION: RotationTable = {
    "0": {W: "1", E: "3", S: "2", N: "0"},
    "1": {W: "2", E: "0", S: "3", N: "1"},
    "2": {W: "3", E: "1", S: "0", N: "2"},
    "3": {W: "0", E: "2", S: "1", N: "3"},
}

CHEST_ROTATION: RotationTable = {
    "2": {W: "4", E: "5", S: "3", N: "2"},
    "3": {W: "5", E: "4", S: "2", N: "3"},
    "4": {W: "2", E: "3", S: "5", N: "4"},
    "5": {W: "3", E: "2", S: "4", N: "5"},
}

TORCH_ROTATION: RotationTable = {
    "1": {W: "4", E: "4", S: "2", N: "1"},
    "2": {W: "3", E: "3", S: "1", N: "2"},
    "3": {W: "1", E: "2", S: "4", N: "3"},
    "4": {W: "2", E: "1", S: "3", N: "4"},
}

FENCE_GATE_ROTATION: RotationTable = {
    "0": {W: "1", E: "1", S: "0", N: "0"},
    "1": {W: "0", E: "0", S: "1", N: "1"},
}

VINE_ROTATION: RotationTable = {
    "1": {W: "3", E: "2", S: "4", N: "1"},
    "2": {W: "4", E: "1", S: "3", N: "2"},
    "3": {W: "1", E: "4", S: "2", N: "3"},
    "4": {W: "2", E: "3", S: "1", N: "4"},
}

ROTATION_TABLES: Dict[ORIENTABLE_KIND, RotationTable] = {
    ORIENTABLE_KIND.STAIRS: STAIRS_ROTATION,
    ORIENTABLE_KIND.BED: BED_ROTATION,
    ORIENTABLE_KIND.CHEST: CHEST_ROTATION,
    ORIENTABLE_KIND.TORCH: TORCH_ROTATION,
    ORIENTABLE_KIND.FENCE_GATE: FENCE_GATE_ROTATION,
    ORIENTABLE_KIND.VINE: VINE_ROTATION,
}

# Returned when the authored tile data is not a row of the table
ROTATION_DEFAULTS: Dict[ORIENTABLE_KIND, str] = {
    ORIENTABLE_KIND.FENCE_GATE: "0",
}

_EXACT_KINDS = {
    "bed": ORIENTABLE_KIND.BED,
    "chest": ORIENTABLE_KIND.CHEST,
    "torch": ORIENTABLE_KIND.TORCH,
    "fence_gate": ORIENTABLE_KIND.FENCE_GATE,
    "vine": ORIENTABLE_KIND.VINE,
}


def orientable_kind_of(block: str) -> ORIENTABLE_KIND:
    if "stairs" in block:
        return ORIENTABLE_KIND.STAIRS
    return _EXACT_KINDS.get(block, ORIENTABLE_KIND.NONE)


def default_tile_data(kind: ORIENTABLE_KIND) -> str:
    return ROTATION_DEFAULTS.get(kind, DEFAULT_TILE_DATA)


def rotate(kind: ORIENTABLE_KIND, tile_data: str, direction: DIRECTION) -> str:
    """Remap north-authored tile data for a block of the given kind.

    Blocks that are not orientable keep their tile data.
    """
    table = ROTATION_TABLES.get(kind)
    if table is None:
        return tile_data

    row = table.get(tile_data)
    if row is None:
        fallback = default_tile_data(kind)
        logger.debug(
            "Unknown tile data for rotation, using default",
            kind=kind.value,
            tile_data=tile_data,
            default=fallback,
        )
        return fallback

    return row[direction]


def rotate_block(block: str, tile_data: str, direction: DIRECTION) -> str:
    return rotate(orientable_kind_of(block), tile_data, direction)
