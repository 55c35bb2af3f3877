import pytest
from structlog.testing import capture_logs

from mc_templater.constants import DIRECTION
from mc_templater.errors import UnknownDirectionError
from mc_templater.placement import (
    BlockSpec,
    apply_offset,
    base_footprint,
    cell_position,
    fill_template,
    is_attachment_block,
    resolve_token,
)
from mc_templater.template import Offset, parse
from mc_templater.testing import single_block_template
from mc_templater.world import Position


def test_row_of_three_facing_north(world):
    template = parse("a=stone\n a a a\n")

    fill_template(template, (0, 64, 0), "north", world)

    assert world.calls == [
        ("create", "stone", 1, 64, 1),
        ("create", "stone", 0, 64, 1),
        ("create", "stone", -1, 64, 1),
    ]


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("north", [(1, 64, 1), (0, 64, 1), (-1, 64, 1)]),
        ("south", [(-1, 64, -1), (0, 64, -1), (1, 64, -1)]),
        ("east", [(-1, 64, -1), (-1, 64, 0), (-1, 64, 1)]),
        ("west", [(1, 64, 1), (1, 64, 0), (1, 64, -1)]),
    ],
)
def test_row_of_three_in_every_direction(world, direction, expected):
    fill_template(parse("a=stone\n a a a\n"), (0, 64, 0), direction, world)

    assert [call[2:] for call in world.creates] == expected


@pytest.mark.parametrize(
    "direction, i, j, k, expected",
    [
        (DIRECTION.NORTH, 0, 0, 0, Position(12, 70, 23)),
        (DIRECTION.NORTH, 2, 1, 3, Position(9, 71, 21)),
        (DIRECTION.SOUTH, 0, 0, 0, Position(8, 70, 17)),
        (DIRECTION.SOUTH, 2, 1, 3, Position(11, 71, 19)),
        (DIRECTION.EAST, 0, 0, 0, Position(7, 70, 18)),
        (DIRECTION.EAST, 2, 1, 3, Position(9, 71, 21)),
        (DIRECTION.WEST, 0, 0, 0, Position(13, 70, 22)),
        (DIRECTION.WEST, 2, 1, 3, Position(11, 71, 19)),
    ],
)
def test_cell_position(direction, i, j, k, expected):
    template = parse(single_block_template("stone", width=4, height=2, depth=3))

    assert cell_position(template, Position(10, 70, 20), direction, i, j, k) == expected


@pytest.mark.parametrize("direction", list(DIRECTION))
@pytest.mark.parametrize("width, depth", [(1, 1), (3, 2), (4, 3), (6, 5)])
def test_every_cell_is_placed_exactly_once(world, direction, width, depth):
    template = parse(single_block_template("stone", width=width, height=3, depth=depth))

    fill_template(template, (5, 64, -5), direction, world)

    coordinates = [call[2:] for call in world.creates]
    assert len(coordinates) == template.size
    assert len(set(coordinates)) == template.size


def test_summon_with_count(world):
    fill_template(parse("b=$chicken count:3\n b\n"), (0, 64, 0), "north", world)

    assert world.calls == [("summon", "chicken", 0, 64, 1)] * 3


def test_summon_without_count(world):
    fill_template(parse("v=$villager\n v\n"), (0, 64, 0), "south", world)

    assert world.calls == [("summon", "villager", 0, 64, -1)]


def test_summon_ignores_words_after_entity(world):
    template = parse("v=$villager 5\nc=$chicken count:2 baby\n v c\n")

    fill_template(template, (0, 64, 0), "north", world)

    assert world.calls == [
        ("summon", "villager", 1, 64, 1),
        ("summon", "chicken", 0, 64, 1),
        ("summon", "chicken", 0, 64, 1),
    ]


@pytest.mark.parametrize("count", ["0", "-2", "x", ""])
def test_invalid_summon_count_summons_once(world, count):
    template = parse(f"c=$chicken count:{count}\n c\n")

    with capture_logs() as logs:
        fill_template(template, (0, 64, 0), "north", world)

    assert world.calls == [("summon", "chicken", 0, 64, 1)]
    warnings = [log for log in logs if log["event"] == "Invalid summon count, summoning once"]
    assert len(warnings) == 1
    assert warnings[0]["count"] == count


def test_missing_key_is_placed_as_placeholder_and_logged(world):
    template = parse("a=stone\n a z a\n")

    with capture_logs() as logs:
        fill_template(template, (0, 64, 0), "north", world)

    assert world.creates == [
        ("create", "stone", 1, 64, 1),
        ("create", "magenta_glazed_terracotta", 0, 64, 1),
        ("create", "stone", -1, 64, 1),
    ]
    missing = [log for log in logs if log["event"] == "Missing key"]
    assert len(missing) == 1
    assert missing[0]["key"] == "z"
    assert missing[0]["log_level"] == "warning"


def test_attachments_are_placed_after_solid_blocks(world):
    template = parse(
        "t=torch 1\nl=lantern\ns=stone\nv=vine 2\nb=bell\n t s l   v s b\n"
    )

    fill_template(template, (0, 64, 0), "north", world)

    assert [call[1] for call in world.creates] == [
        "stone",
        "stone",
        "torch 1",
        "lantern",
        "vine 2",
        "bell",
    ]


def test_rotated_tile_data_is_placed(world):
    template = parse("s=oak_stairs 2\nc=chest 2\np=stone 3\n s c p\n")

    fill_template(template, (0, 64, 0), "east", world)

    assert [call[1] for call in world.creates] == ["oak_stairs 1", "chest 5", "stone 3"]


def test_base_is_filled_before_blocks(world):
    template = parse("a=stone\n> base cobblestone margin:1\n a a a\n a a a\n")

    fill_template(template, (0, 64, 0), "north", world)

    assert world.calls[0] == ("fill", "cobblestone", -2, 63, 0, 2, 63, 3)
    assert len(world.fills) == 1
    assert len(world.creates) == 6


@pytest.mark.parametrize("direction", list(DIRECTION))
@pytest.mark.parametrize("width, depth", [(3, 2), (4, 3), (5, 5)])
def test_base_without_margin_bounds_the_structure(world, direction, width, depth):
    text = single_block_template("stone", width=width, depth=depth)
    template = parse(f"> base dirt margin:0\n{text}")

    fill_template(template, (3, 64, -7), direction, world)

    (_, block, x1, y1, z1, x2, y2, z2) = world.fills[0]
    footprint = {(x, z) for x in range(x1, x2 + 1) for z in range(z1, z2 + 1)}
    placed = {(call[2], call[4]) for call in world.creates}
    assert block == "dirt"
    assert y1 == y2 == 63
    assert footprint == placed


@pytest.mark.parametrize("direction", list(DIRECTION))
def test_base_margin_grows_every_side(direction):
    template = parse("a=stone\n> base dirt margin:2\n a a a\n a a a\n")
    bare = parse("a=stone\n> base dirt\n a a a\n a a a\n")

    x1, y1, z1, x2, y2, z2 = base_footprint(template, (0, 64, 0), direction)
    bx1, by1, bz1, bx2, by2, bz2 = base_footprint(bare, (0, 64, 0), direction)

    assert (x1, z1, x2, z2) == (bx1 - 2, bz1 - 2, bx2 + 2, bz2 + 2)
    assert y1 == by1 == 63


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("north", Position(11, 66, 13)),
        ("south", Position(9, 66, 7)),
        ("east", Position(13, 66, 11)),
        ("west", Position(7, 66, 9)),
    ],
)
def test_apply_offset(direction, expected):
    assert apply_offset((10, 64, 10), direction, Offset(x=1, y=2, z=3)) == expected


def test_offset_moves_the_structure(world):
    fill_template(parse("a=stone\n> offset 0 1 2\n a\n"), (0, 64, 0), "north", world)

    assert world.calls == [("create", "stone", 0, 65, 3)]


@pytest.mark.parametrize(
    "token, direction, expected",
    [
        ("stone", "north", BlockSpec(block="stone")),
        ("oak_stairs 2", "west", BlockSpec(block="oak_stairs 0")),
        ("oak_stairs", "west", BlockSpec(block="oak_stairs")),
        ("fence_gate 5", "east", BlockSpec(block="fence_gate 0")),
        ("torch 1", "east", BlockSpec(block="torch 4", attachment=True)),
        ("soul_lantern", "north", BlockSpec(block="soul_lantern", attachment=True)),
        ("$chicken count:3", "north", BlockSpec(block="chicken", summon=True, count=3)),
        ("$villager", "north", BlockSpec(block="villager", summon=True)),
        ("$cow count:x", "north", BlockSpec(block="cow", summon=True)),
        ("$villager 5", "north", BlockSpec(block="villager", summon=True)),
        ("$chicken count:2 baby", "west", BlockSpec(block="chicken", summon=True, count=2)),
        ("$zombie count:0", "north", BlockSpec(block="zombie", summon=True)),
    ],
)
def test_resolve_token(token, direction, expected):
    assert resolve_token(token, direction) == expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ("torch 2", True),
        ("redstone_torch", True),
        ("lantern", True),
        ("vine 1", True),
        ("bell", True),
        ("stone", False),
        ("oak_stairs 2", False),
    ],
)
def test_is_attachment_block(token, expected):
    assert is_attachment_block(token) is expected


@pytest.mark.parametrize("direction", ["up", "down", "northeast", None, 3])
def test_unknown_direction_is_rejected_before_placement(world, direction):
    with pytest.raises(UnknownDirectionError):
        fill_template(parse("a=stone\n a\n"), (0, 64, 0), direction, world)

    assert world.calls == []


def test_direction_is_case_insensitive(world):
    fill_template(parse("a=stone\n a\n"), (0, 64, 0), "North", world)

    assert world.calls == [("create", "stone", 0, 64, 1)]
