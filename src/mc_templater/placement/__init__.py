from .engine import (
    BlockSpec,
    apply_offset,
    base_footprint,
    cell_position,
    fill_base,
    fill_template,
    is_attachment_block,
    resolve_cells,
    resolve_token,
)
from .rotation import orientable_kind_of, rotate, rotate_block

__all__ = [
    "BlockSpec",
    "apply_offset",
    "base_footprint",
    "cell_position",
    "fill_base",
    "fill_template",
    "is_attachment_block",
    "orientable_kind_of",
    "resolve_cells",
    "resolve_token",
    "rotate",
    "rotate_block",
]
