from typing import List


class CommandWorld:
    """A World that writes each call out as a Bedrock console command.

    Block identifiers may carry a tile data suffix (``oak_stairs 3``) which
    maps directly onto the optional data argument of ``setblock``.
    """

    def __init__(self, namespace: str = ""):
        self.namespace = namespace
        self.commands: List[str] = []

    def _qualify(self, identifier):
        name, sep, data = identifier.partition(" ")
        if self.namespace and ":" not in name:
            name = f"{self.namespace}:{name}"
        return f"{name}{sep}{data}"

    def create(self, block, x, y, z):
        self.commands.append(f"setblock {x} {y} {z} {self._qualify(block)}")

    def summon(self, entity, x, y, z):
        name = self._qualify(entity).split(" ")[0]
        self.commands.append(f"summon {name} {x} {y} {z}")

    def fill(self, block, x1, y1, z1, x2, y2, z2):
        self.commands.append(
            f"fill {x1} {y1} {z1} {x2} {y2} {z2} {self._qualify(block)}"
        )

    def script(self) -> str:
        if not self.commands:
            return ""
        return "\n".join(self.commands) + "\n"
