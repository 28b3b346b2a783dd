"""Markup and JSON text output."""

from json_markup.output.formatter import MarkupFormatter
from json_markup.output.json_serializer import JSONSerializer
from json_markup.output.node_renderer import NodeRenderer

__all__ = ['MarkupFormatter', 'JSONSerializer', 'NodeRenderer']
