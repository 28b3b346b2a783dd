"""Shared data models used across engine modules."""

from dataclasses import dataclass

from json_markup.domain.enums import ReplacerPolicy, TypeTag, UndefinedMarkup


class _Undefined:
    """Marker for an absent entry, as opposed to a present ``None``."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNDEFINED = _Undefined()

FUNCTION_PLACEHOLDER = '(function)'


@dataclass(frozen=True)
class RenderOptions:
    """Options controlling markup rendering and JSON text output."""

    replacer: ReplacerPolicy = ReplacerPolicy.NORMALIZE
    undefined_markup: UndefinedMarkup = UndefinedMarkup.SKIP
    max_depth: int | None = None
    container_class: str = 'jsoner'
    indent: str = '\t'


@dataclass(frozen=True)
class RenderNode:
    """One rendered key/value pair.

    ``child_count`` is only set for arrays and objects and counts the members
    that were actually rendered.
    """

    key: str | None
    tag: TypeTag
    markup: str
    child_count: int | None = None
