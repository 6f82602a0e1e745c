# kleene/operators.py
# This file is part of Kleene - Three-Valued Logic
#
# Logical connectives and reductions over the three-valued domain

"""Kleene strong three-valued connectives.

Every operator is a pure, total function over :class:`Value`. Conjunction is
the minimum and disjunction the maximum under FALSE < UNKNOWN < TRUE;
implication and equivalence are derived from them.

Truth tables (F = FALSE, U = UNKNOWN, T = TRUE; rows are A, columns are B)::

    A ∧ B | F U T     A ∨ B | F U T     A → B | F U T     A ↔ B | F U T
    ------+------     ------+------     ------+------     ------+------
      F   | F F F       F   | F U T       F   | T T T       F   | T U F
      U   | F U U       U   | U U T       U   | U U T       U   | U U U
      T   | F U T       T   | T T T       T   | F U T       T   | F U T
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from kleene.exceptions import UnknownOperatorError
from kleene.value import Value
from utils.logger import get_logger


def identity_equal(a: Value, b: Value) -> Value:
    """TRUE if a and b are the same member, FALSE otherwise.

    This is sameness of value, not logical equivalence: it never yields
    UNKNOWN, and ``identity_equal(UNKNOWN, UNKNOWN)`` is TRUE.
    """
    result = Value.from_bool(a is b)
    get_logger().operator_applied("EQUAL", (a, b), result)
    return result


def not_(a: Value) -> Value:
    """Logical negation. UNKNOWN is its own negation."""
    if a is Value.FALSE:
        result = Value.TRUE
    elif a is Value.TRUE:
        result = Value.FALSE
    else:
        result = Value.UNKNOWN

    get_logger().operator_applied("NOT", (a,), result)
    return result


def and_(a: Value, b: Value) -> Value:
    """Logical conjunction.

    - FALSE AND anything = FALSE
    - UNKNOWN AND (UNKNOWN or TRUE) = UNKNOWN
    - TRUE AND TRUE = TRUE
    """
    if a is Value.FALSE or b is Value.FALSE:
        result = Value.FALSE
    elif a is Value.UNKNOWN or b is Value.UNKNOWN:
        result = Value.UNKNOWN
    else:
        result = Value.TRUE

    get_logger().operator_applied("AND", (a, b), result)
    return result


def or_(a: Value, b: Value) -> Value:
    """Logical disjunction.

    - TRUE OR anything = TRUE
    - UNKNOWN OR (UNKNOWN or FALSE) = UNKNOWN
    - FALSE OR FALSE = FALSE
    """
    if a is Value.TRUE or b is Value.TRUE:
        result = Value.TRUE
    elif a is Value.UNKNOWN or b is Value.UNKNOWN:
        result = Value.UNKNOWN
    else:
        result = Value.FALSE

    get_logger().operator_applied("OR", (a, b), result)
    return result


def implies(a: Value, b: Value) -> Value:
    """Material implication "a implies b", computed as ``or_(not_(a), b)``."""
    return or_(not_(a), b)


def equivalent(a: Value, b: Value) -> Value:
    """Logical biconditional.

    UNKNOWN if either side is UNKNOWN; otherwise TRUE when both sides agree.
    """
    if a is Value.UNKNOWN or b is Value.UNKNOWN:
        result = Value.UNKNOWN
    else:
        result = Value.from_bool(a is b)

    get_logger().operator_applied("EQV", (a, b), result)
    return result


def all_of(values: Iterable[Value]) -> Value:
    """Conjunction of every value, TRUE for an empty input.

    Stops consuming ``values`` at the first FALSE.
    """
    logger = get_logger()
    result = Value.TRUE

    for position, value in enumerate(values):
        result = and_(result, value)
        if result is Value.FALSE:
            logger.reduction_short_circuit("ALL", position, result)
            return result

    return result


def any_of(values: Iterable[Value]) -> Value:
    """Disjunction of every value, FALSE for an empty input.

    Stops consuming ``values`` at the first TRUE.
    """
    logger = get_logger()
    result = Value.FALSE

    for position, value in enumerate(values):
        result = or_(result, value)
        if result is Value.TRUE:
            logger.reduction_short_circuit("ANY", position, result)
            return result

    return result


UNARY_OPERATORS: Dict[str, Callable[[Value], Value]] = {
    "not": not_,
}

BINARY_OPERATORS: Dict[str, Callable[[Value, Value], Value]] = {
    "and": and_,
    "or": or_,
    "implies": implies,
    "equivalent": equivalent,
    "equal": identity_equal,
}

REDUCTIONS: Dict[str, Callable[[Iterable[Value]], Value]] = {
    "all": all_of,
    "any": any_of,
}


def get_operator(name: str) -> Tuple[Optional[int], Callable[..., Value]]:
    """Look up an operator by name.

    Names are matched case-insensitively against the unary, binary and
    reduction registries.

    Returns:
        (arity, function) where arity is None for the n-ary reductions

    Raises:
        UnknownOperatorError: name is not registered
    """
    key = name.lower()
    if key in UNARY_OPERATORS:
        return 1, UNARY_OPERATORS[key]
    if key in BINARY_OPERATORS:
        return 2, BINARY_OPERATORS[key]
    if key in REDUCTIONS:
        return None, REDUCTIONS[key]
    raise UnknownOperatorError(name)


def operator_names() -> List[str]:
    """Every registered operator name, unary first."""
    return [*UNARY_OPERATORS, *BINARY_OPERATORS, *REDUCTIONS]
