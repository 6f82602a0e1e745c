# utils/__init__.py
# This file is part of Kleene - Three-Valued Logic
#
# Utility module exports

from .logger import (
    LogLevel,
    KleeneLogger,
    KleeneFormatter,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "KleeneLogger",
    "KleeneFormatter",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
