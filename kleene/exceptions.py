# kleene/exceptions.py
# This file is part of Kleene - Three-Valued Logic
#
# Exceptions raised when external input cannot be mapped onto the value domain

"""Domain-specific exceptions for three-valued logic conversions.

Only the conversions from text and integers can fail; the logical operators
are total over the value domain. Each conversion error keeps the offending
input so callers can decide whether to default, log, or re-raise.
"""


class KleeneError(Exception):
    """Base class for every exception raised by the kleene package."""

    pass


class ConversionError(KleeneError, ValueError):
    """Raised when an external representation is not a member of the domain."""

    pass


class InvalidLiteral(ConversionError):
    """Raised when text does not match any of the accepted literals.

    Attributes:
        text: The input exactly as it was passed in
    """

    def __init__(self, text: object):
        self.text = text
        super().__init__(f"convert from {text!r}: invalid value")


class InvalidIntegerValue(ConversionError):
    """Raised when an integer is not one of -1, 0 or 1.

    Attributes:
        value: The rejected input
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"convert from {value!r}: invalid value")


class UnknownOperatorError(KleeneError, KeyError):
    """Raised when an operator is looked up by a name that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown operator: {self.name!r}"
