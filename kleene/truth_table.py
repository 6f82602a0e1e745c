# kleene/truth_table.py
# This file is part of Kleene - Three-Valued Logic
#
# Truth-table construction and ASCII rendering for the registered operators

from typing import Dict, List, Tuple

from kleene.operators import get_operator
from kleene.value import VALUES, Value
from utils.logger import get_logger

SYMBOLS = {
    "not": "¬",
    "and": "∧",
    "or": "∨",
    "implies": "→",
    "equivalent": "↔",
    "equal": "=",
    "all": "∧",
    "any": "∨",
}


def _abbrev(value: Value) -> str:
    return value.name[0]


def truth_table(name: str) -> Dict[Tuple[Value, ...], Value]:
    """Evaluate an operator over every combination of operands.

    Unary operators give three rows and binary operators nine, keyed by the
    operand tuple in ascending order of the domain. Reductions are tabulated
    over pairs.

    Raises:
        UnknownOperatorError: name is not a registered operator
    """
    arity, func = get_operator(name)

    if arity == 1:
        return {(a,): func(a) for a in VALUES}
    if arity == 2:
        return {(a, b): func(a, b) for a in VALUES for b in VALUES}
    return {(a, b): func((a, b)) for a in VALUES for b in VALUES}


def format_truth_table(name: str) -> str:
    """Render the truth table of an operator as an ASCII grid."""
    table = truth_table(name)
    symbol = SYMBOLS[name.lower()]
    get_logger().debug(f"Rendering truth table for {name.lower()}")

    if len(table) == len(VALUES):
        return "\n".join(_unary_lines(table, symbol))
    return "\n".join(_binary_lines(table, symbol))


def _unary_lines(table: Dict[Tuple[Value, ...], Value], symbol: str) -> List[str]:
    lines = [
        "+---+----+",
        f"| A | {symbol}A |",
        "|---+----|",
    ]
    for a in VALUES:
        lines.append(f"| {_abbrev(a)} |  {_abbrev(table[(a,)])} |")
    lines.append("+---+----+")
    return lines


def _binary_lines(table: Dict[Tuple[Value, ...], Value], symbol: str) -> List[str]:
    label = f"A {symbol} B"
    lines = [
        "+--------+-----------+",
        "|        |     B     |",
        f"| {label:<6} |---+---+---|",
        "|        | F | U | T |",
        "|----+---+---+---+---|",
    ]
    for a in VALUES:
        # Row label sits on the middle row
        prefix = "| A  |" if a is Value.UNKNOWN else "|    |"
        cells = " | ".join(_abbrev(table[(a, b)]) for b in VALUES)
        lines.append(f"{prefix} {_abbrev(a)} | {cells} |")
    lines.append("+----+---+---+---+---+")
    return lines
