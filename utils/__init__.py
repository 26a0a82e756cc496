# utils/__init__.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Utility module exports

from .logger import (
    LogLevel,
    LogicLogger,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    "LogLevel",
    "LogicLogger",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
