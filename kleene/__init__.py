# kleene/__init__.py
# This file is part of Kleene - Three-Valued Logic
#
# Public API for the three-valued logic library

"""Kleene's strong three-valued logic.

The package provides a closed truth domain {FALSE, UNKNOWN, TRUE} with its
conversions, the standard connectives, and n-ary reductions. FALSE dominates
conjunction and TRUE dominates disjunction; in every other mix UNKNOWN
propagates.

Primary Components:
    Value: The truth domain with text, integer and boolean conversions
    not_, and_, or_, implies, equivalent: Logical connectives
    identity_equal: Sameness of two values, never UNKNOWN
    all_of, any_of: Short-circuiting reductions over iterables
    InvalidLiteral, InvalidIntegerValue: Conversion failures

Example:
    >>> from kleene import Value, and_, all_of
    >>> and_(Value.TRUE, Value.from_text("unknown"))
    <Value.UNKNOWN: 0>
    >>> all_of([])
    <Value.TRUE: 1>
"""

from .exceptions import (
    KleeneError,
    ConversionError,
    InvalidLiteral,
    InvalidIntegerValue,
    UnknownOperatorError,
)
from .value import Value, FALSE, UNKNOWN, TRUE, VALUES
from .operators import (
    identity_equal,
    not_,
    and_,
    or_,
    implies,
    equivalent,
    all_of,
    any_of,
    get_operator,
    operator_names,
)
from .truth_table import truth_table, format_truth_table

__all__ = [
    "Value",
    "FALSE",
    "UNKNOWN",
    "TRUE",
    "VALUES",
    "identity_equal",
    "not_",
    "and_",
    "or_",
    "implies",
    "equivalent",
    "all_of",
    "any_of",
    "get_operator",
    "operator_names",
    "truth_table",
    "format_truth_table",
    "KleeneError",
    "ConversionError",
    "InvalidLiteral",
    "InvalidIntegerValue",
    "UnknownOperatorError",
]

__version__ = "1.0.0"
__description__ = "Kleene strong three-valued logic"
