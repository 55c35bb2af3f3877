import math
from dataclasses import dataclass
from typing import List, Tuple

from mc_templater.config import settings
from mc_templater.constants import ATTACHMENT_BLOCKS, DEFAULT_TILE_DATA, DIRECTION
from mc_templater.template import Offset, Template
from mc_templater.util.logging import get_logger
from mc_templater.world import Position, World

from .rotation import rotate_block

logger = get_logger(__name__)

SUMMON_PREFIX = "$"
COUNT_PREFIX = "count:"


@dataclass(frozen=True)
class BlockSpec:
    block: str
    summon: bool = False
    count: int = 1
    attachment: bool = False

    def place(self, world: World, position: Position) -> None:
        if self.summon:
            for _ in range(self.count):
                world.summon(self.block, position.x, position.y, position.z)
        else:
            world.create(self.block, position.x, position.y, position.z)


def is_attachment_block(token: str) -> bool:
    return any(block in token for block in ATTACHMENT_BLOCKS)


def resolve_token(token: str, direction) -> BlockSpec:
    """Turn a raw token specification into what gets placed for a direction.

    ``$`` marks an entity to summon, ``count:N`` as its second word repeats
    the summon, and a space separated suffix is tile data that orientable
    blocks rotate.
    """
    direction = DIRECTION.parse(direction)
    attachment = is_attachment_block(token)
    count = 1

    if token.startswith(SUMMON_PREFIX):
        parts = token[len(SUMMON_PREFIX) :].split(" ")
        if len(parts) > 1 and parts[1].startswith(COUNT_PREFIX):
            count = _parse_count(parts.pop(1))
        if len(parts) > 1:
            logger.debug(
                "Ignoring extra words after entity", entity=parts[0], extra=parts[1:]
            )
        return BlockSpec(block=parts[0], summon=True, count=count, attachment=attachment)

    if " " in token:
        block, _, tile_data = token.partition(" ")
        tile_data = tile_data.strip() or DEFAULT_TILE_DATA
        token = f"{block} {rotate_block(block, tile_data, direction)}"

    return BlockSpec(block=token, attachment=attachment)


def _parse_count(word):
    value = word[len(COUNT_PREFIX) :]
    try:
        count = int(value)
    except ValueError:
        count = 0

    if count < 1:
        logger.warning("Invalid summon count, summoning once", count=value)
        return 1
    return count


def apply_offset(position, direction, offset: Offset) -> Position:
    """Move the anchor by a template offset authored for a north facing build."""
    position = Position.of(position)
    direction = DIRECTION.parse(direction)

    if direction is DIRECTION.NORTH:
        dx, dz = offset.x, offset.z
    elif direction is DIRECTION.SOUTH:
        dx, dz = -offset.x, -offset.z
    elif direction is DIRECTION.EAST:
        dx, dz = offset.z, offset.x
    else:
        dx, dz = -offset.z, -offset.x

    return position.shifted(dx=dx, dy=offset.y, dz=dz)


def cell_position(
    template: Template, position, direction, i: int, j: int, k: int
) -> Position:
    """World coordinate of cell (depth i, height j, width k).

    North and west round down while south and east round up, which keeps an
    even-width structure on the same centre line for every facing.
    """
    position = Position.of(position)
    direction = DIRECTION.parse(direction)
    x0, y0, z0 = position.x, position.y, position.z
    depth, width = template.depth, template.width
    y = y0 + j

    if direction is DIRECTION.NORTH:
        return Position(math.floor(x0 + width / 2 - k), y, z0 + depth - i)
    elif direction is DIRECTION.SOUTH:
        return Position(math.ceil(x0 - width / 2 + k), y, z0 - depth + i)
    elif direction is DIRECTION.EAST:
        return Position(x0 - depth + i, y, math.ceil(z0 - width / 2 + k))
    else:
        return Position(x0 + depth - i, y, math.floor(z0 + width / 2 - k))


def base_footprint(
    template: Template, position, direction
) -> Tuple[int, int, int, int, int, int]:
    """Corners (x1, y1, z1, x2, y2, z2) of the foundation below a structure."""
    position = Position.of(position)
    direction = DIRECTION.parse(direction)
    margin = template.base.margin

    corners = [
        cell_position(template, position, direction, i, 0, k)
        for i in (0, template.depth - 1)
        for k in (0, template.width - 1)
    ]
    xs = [corner.x for corner in corners]
    zs = [corner.z for corner in corners]
    y = position.y - 1

    return (
        min(xs) - margin,
        y,
        min(zs) - margin,
        max(xs) + margin,
        y,
        max(zs) + margin,
    )


def fill_base(template: Template, position, direction, world: World) -> None:
    x1, y1, z1, x2, y2, z2 = base_footprint(template, position, direction)
    logger.debug(
        "Filling base",
        block=template.base.block,
        start=(x1, y1, z1),
        end=(x2, y2, z2),
    )
    world.fill(template.base.block, x1, y1, z1, x2, y2, z2)


def resolve_cells(template: Template, direction) -> List[Tuple[int, int, int, BlockSpec]]:
    direction = DIRECTION.parse(direction)
    cells = []

    for i, j, k, key in template.iter_cells():
        token = template.tokens.get(key)
        if token is None:
            logger.warning("Missing key", key=key, cell=(i, j, k))
            token = settings.MISSING_BLOCK
        cells.append((i, j, k, resolve_token(token, direction)))

    return cells


def fill_template(template: Template, position, direction, world: World) -> None:
    """Place every cell of a parsed template into the world.

    Solid blocks are placed in a first pass and attachment blocks (torches,
    lanterns, vines, bells) in a second one, so that each attachment already
    has its supporting block when it is created.
    """
    direction = DIRECTION.parse(direction)
    origin = apply_offset(position, direction, template.offset)

    logger.info(
        "Filling template",
        origin=(origin.x, origin.y, origin.z),
        direction=direction.value,
        depth=template.depth,
        height=template.height,
        width=template.width,
    )

    cells = resolve_cells(template, direction)

    if template.base is not None:
        fill_base(template, origin, direction, world)

    for attachments in (False, True):
        placed = 0
        for i, j, k, spec in cells:
            if spec.attachment is not attachments:
                continue
            spec.place(world, cell_position(template, origin, direction, i, j, k))
            placed += 1

        logger.debug(
            "Placed pass",
            pass_name="attachments" if attachments else "solid",
            cells=placed,
        )
