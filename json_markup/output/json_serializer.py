"""JSON text output.

Converts a value tree to compact or indented JSON text. Values JSON cannot
express natively are handled by the configured ReplacerPolicy before the
tree is handed to ``json.dumps``.
"""

import json
import logging
import math
from typing import Any

from json_markup.domain.enums import ReplacerPolicy, TypeTag
from json_markup.domain.errors import DuplicateKeyError, UnsupportedTypeError
from json_markup.domain.models import FUNCTION_PLACEHOLDER
from json_markup.domain.value_walker import ROOT_PATH, PathGuard, element_path, key_text, member_path
from json_markup.type_classifier import TypeClassifier

logger = logging.getLogger(__name__)

# Marks a node the pass-through policy leaves out of the output
_OMIT = object()


class JSONSerializer:
    """Writes value trees as JSON text.

    Policies:
        NORMALIZE:    undefined → null, function → "(function)"
        PASS_THROUGH: undefined/function members of objects are omitted,
                      array elements become null, a root yields no text

    Args:
        replacer: Policy for undefined and function values.
        max_depth: Maximum container nesting, or None for the default limit.
    """

    def __init__(
        self,
        replacer: ReplacerPolicy = ReplacerPolicy.NORMALIZE,
        max_depth: int | None = None,
        classifier: TypeClassifier | None = None,
    ) -> None:
        self._replacer = replacer
        self._max_depth = max_depth
        self._classifier = classifier or TypeClassifier()

    def serialize_compact(self, value: Any) -> str | None:
        """Serialize without any whitespace between tokens."""
        return self._dumps(value, indent=None, separators=(',', ':'))

    def serialize_pretty(self, value: Any, indent: str = '\t') -> str | None:
        """Serialize with one ``indent`` unit per nesting level."""
        return self._dumps(value, indent=indent, separators=(',', ': '))

    def to_native(self, value: Any) -> Any:
        """Return a JSON-native copy of ``value`` with the policy applied.

        Returns None for a root the pass-through policy omits; use
        ``serialize_*`` to tell that apart from a null root.
        """
        native = self._replace(value, ROOT_PATH, PathGuard(self._max_depth), in_array=False)
        return None if native is _OMIT else native

    def _dumps(self, value: Any, indent: str | None, separators: tuple[str, str]) -> str | None:
        native = self._replace(value, ROOT_PATH, PathGuard(self._max_depth), in_array=False)
        if native is _OMIT:
            logger.debug("Root value omitted by pass-through policy")
            return None
        return json.dumps(native, indent=indent, separators=separators, ensure_ascii=False)

    def _replace(self, value: Any, path: str, guard: PathGuard, in_array: bool) -> Any:
        tag = self._classifier.classify(value)

        match tag:
            case TypeTag.NULL | TypeTag.STRING | TypeTag.BOOLEAN:
                return value
            case TypeTag.NUMBER:
                return _json_number(value)
            case TypeTag.DATE:
                return value.isoformat()
            case TypeTag.UNDEFINED | TypeTag.FUNCTION:
                return self._substitute(tag, in_array)
            case TypeTag.ARRAY:
                with guard.enter(value, path):
                    return [
                        self._replace(item, element_path(path, i), guard, in_array=True)
                        for i, item in enumerate(value)
                    ]
            case TypeTag.OBJECT:
                result = {}
                seen = set()
                with guard.enter(value, path):
                    for k, v in value.items():
                        name = key_text(k)
                        if name in seen:
                            raise DuplicateKeyError(name, path)
                        seen.add(name)
                        native = self._replace(v, member_path(path, name), guard, in_array=False)
                        if native is not _OMIT:
                            result[name] = native
                return result

        raise UnsupportedTypeError(tag.value)

    def _substitute(self, tag: TypeTag, in_array: bool) -> Any:
        if self._replacer is ReplacerPolicy.NORMALIZE:
            return FUNCTION_PLACEHOLDER if tag is TypeTag.FUNCTION else None
        return None if in_array else _OMIT


def _json_number(value: Any) -> Any:
    if isinstance(value, int):
        return int(value)
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        return None
    return number
