"""Engine wrapping one root value."""

from typing import Any

from json_markup.domain.models import RenderNode, RenderOptions
from json_markup.output.formatter import MarkupFormatter
from json_markup.output.json_serializer import JSONSerializer


class JSONMarkup:
    """Renders one value as HTML markup or JSON text.

    The engine keeps no state besides the value and its options, never
    mutates the value, and can be reused for any number of calls.

    Args:
        value: Root value to render.
        options: Rendering options; defaults to ``RenderOptions()``.
    """

    def __init__(self, value: Any, options: RenderOptions | None = None) -> None:
        self._value = value
        self._options = options or RenderOptions()
        self._formatter = MarkupFormatter(self._options)
        self._serializer = JSONSerializer(self._options.replacer, max_depth=self._options.max_depth)

    @property
    def value(self) -> Any:
        return self._value

    @property
    def options(self) -> RenderOptions:
        return self._options

    def to_html(self) -> str:
        """Markup fragment wrapped in the outer container element."""
        return self._formatter.to_html(self._value)

    def render_node(self) -> RenderNode | None:
        return self._formatter.format_node(None, self._value)

    def serialize_compact(self) -> str | None:
        return self._serializer.serialize_compact(self._value)

    def serialize_pretty(self) -> str | None:
        return self._serializer.serialize_pretty(self._value, self._options.indent)

    uglify = serialize_compact
    prettify = serialize_pretty
