import enum

from .errors import UnknownDirectionError


class DIRECTION(enum.Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @classmethod
    def parse(cls, value) -> "DIRECTION":
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass

        raise UnknownDirectionError(
            f"Unknown direction {value!r}, expected one of "
            f"{', '.join(member.value for member in cls)}"
        )

    @classmethod
    def from_rotation(cls, rotation: int) -> "DIRECTION":
        """Map a sign's rotation value (0-15, clockwise from south) onto a facing."""
        if rotation < 4:
            return cls.SOUTH
        elif rotation < 8:
            return cls.WEST
        elif rotation < 12:
            return cls.NORTH
        elif rotation < 16:
            return cls.EAST
        return cls.NORTH


# Blocks whose tile data encodes a facing and must be remapped when a
# template is rotated away from its authored (north) orientation
class ORIENTABLE_KIND(enum.Enum):
    STAIRS = "stairs"
    BED = "bed"
    CHEST = "chest"
    TORCH = "torch"
    FENCE_GATE = "fence_gate"
    VINE = "vine"
    NONE = "none"


# Blocks that need a solid neighbour to exist before they can be placed
ATTACHMENT_BLOCKS = ("torch", "lantern", "vine", "bell")

DEFAULT_TILE_DATA = "2"
