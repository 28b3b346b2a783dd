"""Shared guard for recursive walks over value trees.

Paths are reported in a JSONPath-like notation:
  - '$'             → root value
  - '$.name'        → mapping member
  - '$.items[2]'    → sequence element
  - '$.items[2].id' → mixed
"""

import math
import sys
from contextlib import contextmanager
from typing import Any, Iterator

from json_markup.domain.errors import CyclicStructureError, DepthLimitError, UnsupportedTypeError

ROOT_PATH = '$'

# Interpreter frames one nesting level may cost across the recursive walks
FRAMES_PER_LEVEL = 4


def member_path(path: str, key: Any) -> str:
    """Path of a mapping member below ``path``."""
    return f"{path}.{key}"


def element_path(path: str, index: int) -> str:
    """Path of a sequence element below ``path``."""
    return f"{path}[{index}]"


def key_text(key: Any) -> str:
    """Text of a mapping key, converted the way ``json.dumps`` converts keys.

    Strings are kept, ``True``/``False``/``None`` become ``true``/``false``/
    ``null`` and numbers use their JSON spelling. Any other key type raises
    UnsupportedTypeError.
    """
    if isinstance(key, str):
        return key
    if key is True:
        return 'true'
    if key is False:
        return 'false'
    if key is None:
        return 'null'
    if isinstance(key, int):
        return int.__repr__(key)
    if isinstance(key, float):
        if math.isnan(key):
            return 'NaN'
        if math.isinf(key):
            return 'Infinity' if key > 0 else '-Infinity'
        return float.__repr__(key)
    raise UnsupportedTypeError(f"{type(key).__name__} (mapping key)")


def default_max_depth() -> int:
    """Deepest nesting the interpreter's recursion limit leaves room for."""
    return sys.getrecursionlimit() // FRAMES_PER_LEVEL


class PathGuard:
    """Tracks the containers on the current walk path.

    A container that is entered while already on the path is a cycle. A
    container shared between siblings is fine, it is left before the next
    sibling is entered.

    Nesting is always bounded: without ``max_depth`` the limit is
    ``default_max_depth()``, and a larger ``max_depth`` is capped to it.

    Args:
        max_depth: Maximum container nesting, or None for the default.
    """

    def __init__(self, max_depth: int | None = None) -> None:
        ceiling = default_max_depth()
        self._max_depth = ceiling if max_depth is None else min(max_depth, ceiling)
        self._active: set[int] = set()
        self._depth = 0

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @contextmanager
    def enter(self, container: Any, path: str) -> Iterator[None]:
        """Mark ``container`` as being walked for the duration of the block."""
        marker = id(container)
        if marker in self._active:
            raise CyclicStructureError(path)
        if self._depth >= self._max_depth:
            raise DepthLimitError(self._max_depth, path)

        self._active.add(marker)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            self._active.discard(marker)
