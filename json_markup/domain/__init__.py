"""Domain types for the JSON markup engine."""

from json_markup.domain.enums import ReplacerPolicy, TypeTag, UndefinedMarkup
from json_markup.domain.errors import (
    CyclicStructureError,
    DepthLimitError,
    DuplicateKeyError,
    JSONMarkupError,
    UnsupportedTypeError,
)
from json_markup.domain.models import UNDEFINED, RenderNode, RenderOptions

__all__ = [
    'TypeTag', 'ReplacerPolicy', 'UndefinedMarkup',
    'JSONMarkupError', 'UnsupportedTypeError', 'CyclicStructureError',
    'DepthLimitError', 'DuplicateKeyError', 'UNDEFINED', 'RenderNode', 'RenderOptions',
]
