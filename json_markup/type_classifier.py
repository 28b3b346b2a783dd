"""Type classification for values reachable from JSON."""

import datetime
import decimal
import numbers
from collections.abc import Mapping, Sequence
from typing import Any

from json_markup.domain.enums import TypeTag
from json_markup.domain.errors import UnsupportedTypeError
from json_markup.domain.models import UNDEFINED


class TypeClassifier:
    """Determines the semantic type tag of a value from its structure.

    Mappings and sequences are recognised through the collection ABCs rather
    than concrete classes, so ``OrderedDict``, tuples and user containers get
    the same tags as ``dict`` and ``list``.
    """

    # Decimal is a Number but not registered as Real; complex is rejected
    NUMBER_TYPES = (numbers.Real, decimal.Decimal)

    # str and bytes are sequences too, but never arrays
    TEXT_TYPES = (str, bytes, bytearray)

    def classify(self, value: Any) -> TypeTag:
        if value is UNDEFINED:
            return TypeTag.UNDEFINED
        if value is None:
            return TypeTag.NULL
        if isinstance(value, bool):
            return TypeTag.BOOLEAN
        if isinstance(value, self.NUMBER_TYPES):
            return TypeTag.NUMBER
        if isinstance(value, str):
            return TypeTag.STRING
        if isinstance(value, datetime.date):
            return TypeTag.DATE
        if isinstance(value, Mapping):
            return TypeTag.OBJECT
        if isinstance(value, Sequence) and not isinstance(value, self.TEXT_TYPES):
            return TypeTag.ARRAY
        if callable(value):
            return TypeTag.FUNCTION

        raise UnsupportedTypeError(type(value).__name__)
