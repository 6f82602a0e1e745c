#!/usr/bin/env python3
# run_kleene.py
# This file is part of Kleene - Three-Valued Logic
#
# Command-line interface for evaluating three-valued operators

import sys
import argparse
from typing import List, Optional, Sequence

from kleene import Value, format_truth_table, get_operator, operator_names
from kleene.exceptions import InvalidLiteral, UnknownOperatorError
from utils.logger import configure_logging, get_logger


class ArityError(ValueError):
    """Raised when an operator receives the wrong number of operands."""

    pass


def parse_operands(literals: Sequence[str]) -> List[Value]:
    """Convert command-line literals to values.

    Raises:
        InvalidLiteral: A literal is not a recognized truth value
    """
    return [Value.from_text(literal) for literal in literals]


def evaluate(operator_name: str, literals: Sequence[str]) -> Value:
    """Apply a named operator to literal operands.

    Args:
        operator_name: Registered operator name (e.g. "and", "not", "all")
        literals: Operand literals such as "TRUE", "unknown" or "-1"

    Returns:
        Result of the operator

    Raises:
        UnknownOperatorError: Operator name is not registered
        ArityError: Operand count does not match the operator
        InvalidLiteral: An operand literal is invalid
    """
    logger = get_logger()
    arity, func = get_operator(operator_name)

    if arity is not None and len(literals) != arity:
        raise ArityError(
            f"{operator_name} expects {arity} operand(s), got {len(literals)}"
        )

    operands = parse_operands(literals)
    logger.info(f"Evaluating {operator_name.lower()} over {len(operands)} operand(s)")

    if arity is None:
        return func(operands)
    return func(*operands)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Kleene three-valued logic calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Operators: {", ".join(operator_names())}

Examples:
  python run_kleene.py and TRUE unknown
  python run_kleene.py implies -1 0
  python run_kleene.py all true true false
  python run_kleene.py equivalent --table

Literals are case-insensitive: FALSE/-1, UNKNOWN/0, TRUE/1.
        """,
    )

    parser.add_argument("operator", help="Operator to apply")

    parser.add_argument("values", nargs="*", help="Operand literals")

    parser.add_argument(
        "--table", action="store_true", help="Print the operator's truth table"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the calculator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.table:
            print(format_truth_table(args.operator))
            return 0

        result = evaluate(args.operator, args.values)
        print(result)
        return 0

    except InvalidLiteral as e:
        logger.error(f"Invalid operand: {e}")
        return 1

    except ArityError as e:
        logger.error(f"Usage error: {e}")
        return 2

    except UnknownOperatorError as e:
        logger.error(f"{e}; choose one of: {', '.join(operator_names())}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
