from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mc_templater.errors import MalformedTemplateError

Row = Tuple[str, ...]
Layer = Tuple[Row, ...]


class Offset(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = 0
    y: int = 0
    z: int = 0


class Base(BaseModel):
    """Foundation filled one level below the structure's footprint."""

    model_config = ConfigDict(frozen=True)

    block: str
    properties: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("properties")
    @classmethod
    def freeze_properties(cls, value):
        return MappingProxyType(dict(value))

    @property
    def margin(self) -> int:
        value = self.properties.get("margin", "0")
        try:
            return int(value)
        except ValueError:
            raise MalformedTemplateError(f"base margin must be an integer, got {value!r}")


class Template(BaseModel):
    model_config = ConfigDict(frozen=True)

    tokens: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    layers: Tuple[Layer, ...]
    offset: Offset = Field(default_factory=Offset)
    base: Optional[Base] = None

    @field_validator("tokens")
    @classmethod
    def freeze_tokens(cls, value):
        return MappingProxyType(dict(value))

    @property
    def depth(self) -> int:
        return len(self.layers)

    @property
    def height(self) -> int:
        return len(self.layers[0])

    @property
    def width(self) -> int:
        return len(self.layers[0][0])

    @property
    def size(self) -> int:
        return self.depth * self.height * self.width

    def cell_key(self, i: int, j: int, k: int) -> str:
        return self.layers[i][j][k]

    def iter_cells(self):
        """Yield (i, j, k, key) in depth, height, width order."""
        for i, layer in enumerate(self.layers):
            for j, row in enumerate(layer):
                for k, key in enumerate(row):
                    yield i, j, k, key
