# utils/logger.py
# This file is part of Kleene - Three-Valued Logic
#
# Logging utility for the logic library with configurable levels

import logging
import sys
from enum import Enum
from typing import Iterable, Optional


class LogLevel(Enum):
    """Log levels for the logic library."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class KleeneLogger:
    """Centralized logger with a single console handler and structured helpers."""

    def __init__(self, name: str = "kleene", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(KleeneFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    @property
    def level(self) -> int:
        return self.logger.level

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug_enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (operator traces)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for logic operations
    def operator_applied(self, name: str, operands: Iterable[object], result: object):
        """Log the application of a logical operator."""
        if not self.is_debug_enabled():
            return
        operand_str = ", ".join(str(op) for op in operands)
        self.debug(f"{name}({operand_str}) = {result}")

    def reduction_short_circuit(self, name: str, position: int, result: object):
        """Log early exit of an n-ary reduction."""
        self.debug(f"{name} short-circuited to {result} at position {position}")

    def conversion_failed(self, source: str, raw: object):
        """Log a rejected conversion input."""
        self.debug(f"Rejected {source} input: {raw!r}")


class KleeneFormatter(logging.Formatter):
    """Formatter that keeps INFO output clean and tags debug lines."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[KleeneLogger] = None


def get_logger(name: str = "kleene") -> KleeneLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "kleene")

    Returns:
        KleeneLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = KleeneLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
