"""Errors raised by the JSON markup engine."""


class JSONMarkupError(Exception):
    """Base error for the engine."""
    pass


class UnsupportedTypeError(JSONMarkupError, TypeError):
    """A value matches none of the known type tags."""

    def __init__(self, value_type: str):
        self.value_type = value_type
        super().__init__(f"No markup render method for type {value_type}")


class CyclicStructureError(JSONMarkupError, ValueError):
    """A container references itself through one of its descendants."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Cyclic reference detected at {path}")


class DepthLimitError(JSONMarkupError, ValueError):
    """Nesting is deeper than the configured maximum."""

    def __init__(self, max_depth: int, path: str):
        self.max_depth = max_depth
        self.path = path
        super().__init__(f"Nesting exceeds max depth {max_depth} at {path}")


class DuplicateKeyError(JSONMarkupError, ValueError):
    """Two mapping keys convert to the same JSON member name."""

    def __init__(self, key: str, path: str):
        self.key = key
        self.path = path
        super().__init__(f"Duplicate member name {key!r} at {path}")
