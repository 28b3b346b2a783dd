"""Render JSON-like values as collapsible HTML markup and JSON text."""

from json_markup.domain import (
    UNDEFINED,
    CyclicStructureError,
    DepthLimitError,
    DuplicateKeyError,
    JSONMarkupError,
    RenderNode,
    RenderOptions,
    ReplacerPolicy,
    TypeTag,
    UndefinedMarkup,
    UnsupportedTypeError,
)
from json_markup.engine import JSONMarkup

__version__ = '1.0.0'

__all__ = [
    'JSONMarkup', 'RenderOptions', 'RenderNode', 'UNDEFINED',
    'TypeTag', 'ReplacerPolicy', 'UndefinedMarkup',
    'JSONMarkupError', 'UnsupportedTypeError', 'CyclicStructureError', 'DepthLimitError',
    'DuplicateKeyError',
]
