from typing import List, Tuple

Call = Tuple


class RecordingWorld:
    """World double that keeps every call in the order it was issued.

    Each entry of ``calls`` is ``(method, identifier, *coordinates)``.
    """

    def __init__(self):
        self.calls: List[Call] = []

    def create(self, block, x, y, z):
        self.calls.append(("create", block, x, y, z))

    def summon(self, entity, x, y, z):
        self.calls.append(("summon", entity, x, y, z))

    def fill(self, block, x1, y1, z1, x2, y2, z2):
        self.calls.append(("fill", block, x1, y1, z1, x2, y2, z2))

    def of(self, method) -> List[Call]:
        return [call for call in self.calls if call[0] == method]

    @property
    def creates(self) -> List[Call]:
        return self.of("create")

    @property
    def summons(self) -> List[Call]:
        return self.of("summon")

    @property
    def fills(self) -> List[Call]:
        return self.of("fill")


def single_block_template(block: str, width: int = 1, height: int = 1, depth: int = 1) -> str:
    """Template text of a solid box made of one block, keyed ``a``."""
    row = " ".join(["a"] * width)
    layer = "   ".join([row] * height)
    return f"a={block}\n" + "".join(f" {layer}\n" for _ in range(depth))
