"""Recursive markup formatting.

Walks a value tree and renders every key/value pair through the
NodeRenderer. Containers render their members first, drop the suppressed
ones, then join the survivors, so separators only ever appear between
rendered members.
"""

import logging
import math
from typing import Any

from json_markup.domain.enums import TypeTag, UndefinedMarkup
from json_markup.domain.errors import UnsupportedTypeError
from json_markup.domain.models import FUNCTION_PLACEHOLDER, RenderNode, RenderOptions
from json_markup.domain.value_walker import ROOT_PATH, PathGuard, element_path, key_text, member_path
from json_markup.output.node_renderer import NodeRenderer
from json_markup.sanitizer import StringSanitizer
from json_markup.type_classifier import TypeClassifier

logger = logging.getLogger(__name__)


def number_text(value: Any) -> str:
    """Canonical display text of a number."""
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        return repr(value)
    return str(value)


class MarkupFormatter:
    """Renders a value tree as nested, annotated HTML.

    Args:
        options: Rendering options; defaults to ``RenderOptions()``.
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        classifier: TypeClassifier | None = None,
        sanitizer: StringSanitizer | None = None,
        renderer: NodeRenderer | None = None,
    ) -> None:
        self._options = options or RenderOptions()
        self._classifier = classifier or TypeClassifier()
        self._sanitizer = sanitizer or StringSanitizer()
        self._renderer = renderer or NodeRenderer()

    def format(self, key: str | None, value: Any) -> str | None:
        """Render one pair, or return None when the value is suppressed."""
        node = self.format_node(key, value)
        return node.markup if node is not None else None

    def format_node(self, key: str | None, value: Any) -> RenderNode | None:
        guard = PathGuard(self._options.max_depth)
        node = self._format(key, value, ROOT_PATH, guard)
        if node is None:
            logger.debug("Root value suppressed, nothing rendered")
        else:
            logger.debug(f"Rendered {node.tag.value} root ({len(node.markup)} chars)")
        return node

    def to_html(self, value: Any) -> str:
        """Render a whole tree wrapped in the outer container element."""
        markup = self.format(None, value) or ''
        return f'<div class="{self._options.container_class}">{markup}</div>'

    def _format(self, key: Any, value: Any, path: str, guard: PathGuard) -> RenderNode | None:
        tag = self._classifier.classify(value)
        safe_key = None if key is None else self._sanitizer.sanitize_key(str(key))

        match tag:
            case TypeTag.NULL:
                return self._leaf(safe_key, 'null', tag)
            case TypeTag.BOOLEAN:
                return self._leaf(safe_key, 'true' if value else 'false', tag)
            case TypeTag.NUMBER:
                return self._leaf(safe_key, number_text(value), tag)
            case TypeTag.STRING:
                return self._leaf(safe_key, f'"{self._sanitizer.sanitize(value)}"', tag)
            case TypeTag.DATE:
                return self._leaf(safe_key, f'"{value.isoformat()}"', tag)
            case TypeTag.UNDEFINED | TypeTag.FUNCTION:
                return self._placeholder(safe_key, tag)
            case TypeTag.ARRAY:
                with guard.enter(value, path):
                    children = [
                        self._format(None, item, element_path(path, i), guard)
                        for i, item in enumerate(value)
                    ]
                return self._container(safe_key, children, '[', ']', tag)
            case TypeTag.OBJECT:
                with guard.enter(value, path):
                    children = []
                    for k, v in value.items():
                        name = key_text(k)
                        children.append(self._format(name, v, member_path(path, name), guard))
                return self._container(safe_key, children, '{', '}', tag)

        raise UnsupportedTypeError(tag.value)

    def _leaf(self, key: str | None, text: str, tag: TypeTag) -> RenderNode:
        return RenderNode(key=key, tag=tag, markup=self._renderer.render(key, text, tag))

    def _placeholder(self, key: str | None, tag: TypeTag) -> RenderNode | None:
        if self._options.undefined_markup is UndefinedMarkup.SKIP:
            return None
        if tag is TypeTag.FUNCTION:
            return self._leaf(key, f'"{FUNCTION_PLACEHOLDER}"', tag)
        return self._leaf(key, 'null', TypeTag.NULL)

    def _container(
        self,
        key: str | None,
        children: list[RenderNode | None],
        opening: str,
        closing: str,
        tag: TypeTag,
    ) -> RenderNode:
        rendered = [child.markup for child in children if child is not None]
        items = '<li>' + ',</li><li>'.join(rendered) + '</li>' if rendered else ''
        content = f'{opening}<ul>{items}</ul>{closing}'
        return RenderNode(
            key=key,
            tag=tag,
            markup=self._renderer.render(key, content, tag, len(rendered)),
            child_count=len(rendered),
        )
