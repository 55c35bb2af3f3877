from ._model import Base, Offset, Template
from ._parser import parse

__all__ = [
    "Base",
    "Offset",
    "Template",
    "parse",
]
