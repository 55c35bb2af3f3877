"""Template text parsing.

A template is a line oriented description of a structure:

    # comment
    w=oak_planks
    s=oak_stairs 2
    > offset 0 0 1
    > base cobblestone margin:1
     w w w   w s w

Token lines (``key=spec``) define what a key places. Every line that starts
with a space is one depth slice, front to back. Inside a slice, runs of three
spaces separate rows (bottom row first) and single spaces separate the cells
of a row (one token key per cell).
"""

from typing import Dict, List, Optional

from mc_templater.errors import MalformedTemplateError
from mc_templater.util.logging import get_logger

from ._model import Base, Offset, Template

logger = get_logger(__name__)

ROW_SEPARATOR = "   "
CELL_SEPARATOR = " "
OFFSET_DIRECTIVE = "> offset "
BASE_DIRECTIVE = "> base "


def parse(text: str) -> Template:
    tokens: Dict[str, str] = {}
    layers: List[tuple] = []
    offset = Offset()
    base: Optional[Base] = None

    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        stripped = line.strip()

        if not stripped or stripped.startswith("#"):
            continue

        if "=" in line:
            key, _, value = line.partition("=")
            tokens[key.strip()] = value.strip()
        elif line.startswith(" "):
            layers.append(_parse_layer(stripped))
        elif line.startswith(OFFSET_DIRECTIVE):
            offset = _parse_offset(line[len(OFFSET_DIRECTIVE) :], line_number)
        elif line.startswith(BASE_DIRECTIVE):
            base = _parse_base(line[len(BASE_DIRECTIVE) :], line_number)
        else:
            logger.debug("Ignoring unrecognised template line", line_number=line_number)

    _validate_shape(layers)

    return Template(tokens=tokens, layers=tuple(layers), offset=offset, base=base)


def _parse_layer(text):
    return tuple(
        tuple(row.split(CELL_SEPARATOR)) for row in text.split(ROW_SEPARATOR)
    )


def _parse_offset(text, line_number):
    parts = text.split()
    if len(parts) != 3:
        raise MalformedTemplateError(
            f"offset needs three integers, got {text.strip()!r}", line_number
        )

    try:
        x, y, z = (int(part) for part in parts)
    except ValueError:
        raise MalformedTemplateError(
            f"offset needs three integers, got {text.strip()!r}", line_number
        )

    return Offset(x=x, y=y, z=z)


def _parse_base(text, line_number):
    parts = text.split()
    if not parts:
        raise MalformedTemplateError("base needs a block identifier", line_number)

    properties = {}
    for word in parts[1:]:
        name, sep, value = word.partition(":")
        if not sep:
            logger.warning(
                "Ignoring base property without a value",
                property=word,
                line_number=line_number,
            )
            continue
        properties[name] = value

    return Base(block=parts[0], properties=properties)


def _validate_shape(layers):
    if not layers:
        raise MalformedTemplateError("template has no layers")

    height = len(layers[0])
    width = len(layers[0][0])
    if height == 0 or width == 0:
        raise MalformedTemplateError("template has an empty first layer")

    for i, layer in enumerate(layers):
        if len(layer) != height:
            raise MalformedTemplateError(
                f"layer {i} has {len(layer)} rows, expected {height}"
            )
        for j, row in enumerate(layer):
            if len(row) != width:
                raise MalformedTemplateError(
                    f"layer {i} row {j} has {len(row)} cells, expected {width}"
                )
