# kleene/value.py
# This file is part of Kleene - Three-Valued Logic
#
# The three-valued truth domain and its textual/integer/boolean conversions

"""Truth values of Kleene's strong logic of indeterminacy.

The domain is closed and totally ordered::

    FALSE   (-1)  <  UNKNOWN (0)  <  TRUE (1)

Members are singletons. Conversions from text and integers validate their
input and raise instead of defaulting to UNKNOWN.
"""

from __future__ import annotations

import operator
from enum import Enum

from kleene.exceptions import InvalidIntegerValue, InvalidLiteral
from utils.logger import get_logger


class Value(Enum):
    """Three-valued truth value.

    Values:
        FALSE: Definitely false
        UNKNOWN: Truth cannot be determined
        TRUE: Definitely true
    """

    FALSE = -1
    UNKNOWN = 0
    TRUE = 1

    def __str__(self) -> str:
        return self.name

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        # UNKNOWN has no boolean reading; to_bool() is the explicit projection
        raise TypeError(f"{self!r} cannot be directly converted to a boolean value")

    def to_display_string(self) -> str:
        """Canonical uppercase literal: "FALSE", "UNKNOWN" or "TRUE"."""
        return self.name

    def to_int(self) -> int:
        """Integer encoding: -1, 0 or 1."""
        return self._value_

    def to_bool(self) -> bool:
        """Return True only for TRUE.

        This projection is lossy: FALSE and UNKNOWN both map to False, so
        ``Value.from_bool(v.to_bool())`` does not give back UNKNOWN.
        """
        return self is Value.TRUE

    def is_known(self) -> bool:
        """Whether the value is conclusive (TRUE or FALSE)."""
        return self is not Value.UNKNOWN

    @classmethod
    def from_text(cls, text: str) -> Value:
        """Convert a literal to a value.

        "false"/"-1", "unknown"/"0" and "true"/"1" are accepted in any
        casing. Surrounding whitespace is not stripped.

        Raises:
            InvalidLiteral: text is not one of the accepted literals
        """
        member = None
        if isinstance(text, str):
            member = _LITERALS.get(text.upper())
        if member is None:
            get_logger().conversion_failed("text", text)
            raise InvalidLiteral(text)
        return member

    @classmethod
    def from_int(cls, number: int) -> Value:
        """Convert -1, 0 or 1 to FALSE, UNKNOWN or TRUE.

        Booleans are rejected rather than read as 0/1.

        Raises:
            InvalidIntegerValue: number is not exactly -1, 0 or 1
        """
        member = None
        if not isinstance(number, bool):
            try:
                member = _INTEGERS.get(operator.index(number))
            except TypeError:
                member = None
        if member is None:
            get_logger().conversion_failed("integer", number)
            raise InvalidIntegerValue(number)
        return member

    @classmethod
    def from_bool(cls, flag: bool) -> Value:
        """TRUE for a truthy flag, FALSE otherwise. Never UNKNOWN."""
        return cls.TRUE if flag else cls.FALSE

    # Ordering follows the integer encoding
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._value_ < other._value_

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._value_ <= other._value_

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._value_ > other._value_

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._value_ >= other._value_

    # Operator syntax: ~a, a & b, a | b
    def __invert__(self) -> Value:
        from kleene.operators import not_

        return not_(self)

    def __and__(self, other: object) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        from kleene.operators import and_

        return and_(self, other)

    def __or__(self, other: object) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        from kleene.operators import or_

        return or_(self, other)


FALSE = Value.FALSE
UNKNOWN = Value.UNKNOWN
TRUE = Value.TRUE

# Members in ascending order
VALUES = (FALSE, UNKNOWN, TRUE)

_LITERALS = {
    "FALSE": FALSE,
    "-1": FALSE,
    "UNKNOWN": UNKNOWN,
    "0": UNKNOWN,
    "TRUE": TRUE,
    "1": TRUE,
}

_INTEGERS = {
    -1: FALSE,
    0: UNKNOWN,
    1: TRUE,
}
