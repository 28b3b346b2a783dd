"""Domain enums for the JSON markup engine."""
from enum import Enum


class TypeTag(Enum):
    """Semantic type of a rendered value."""
    NULL = "null"
    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    ARRAY = "array"
    OBJECT = "object"
    FUNCTION = "function"


class ReplacerPolicy(Enum):
    """How the JSON text serializer treats undefined and function values."""
    NORMALIZE = "normalize"
    PASS_THROUGH = "pass_through"


class UndefinedMarkup(Enum):
    """How the markup formatter treats undefined and function values."""
    SKIP = "skip"
    PLACEHOLDER = "placeholder"
