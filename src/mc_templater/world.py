from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence, Union


@dataclass(frozen=True)
class Position:
    x: int
    y: int
    z: int

    @classmethod
    def of(cls, value: Union["Position", Sequence[int], Mapping[str, int]]) -> "Position":
        """Coerce a Position, an (x, y, z) sequence or an {x, y, z} mapping."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(int(value["x"]), int(value["y"]), int(value["z"]))

        x, y, z = value
        return cls(int(x), int(y), int(z))

    def shifted(self, dx: int = 0, dy: int = 0, dz: int = 0) -> "Position":
        return Position(self.x + dx, self.y + dy, self.z + dz)


class World(Protocol):
    """The host capabilities a template fill is allowed to call.

    Calls must be applied in the order they are issued; attachment blocks
    rely on their supporting block having been created by an earlier call.
    """

    def create(self, block: str, x: int, y: int, z: int) -> None: ...

    def summon(self, entity: str, x: int, y: int, z: int) -> None: ...

    def fill(
        self, block: str, x1: int, y1: int, z1: int, x2: int, y2: int, z2: int
    ) -> None: ...
