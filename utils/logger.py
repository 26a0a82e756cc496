# utils/logger.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Logging utility for formula parsing, rewriting and analysis

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for the expression engine."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogicLogger:
    """Centralized logger for the expression engine with compact structured output."""

    def __init__(self, name: str = "sentential", level: LogLevel = LogLevel.INFO):
        """Initialize the engine logger.

        Args:
            name: Logger name (typically package name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(LogicFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug_enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
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

    # Specialized methods for engine events
    def formula_parsed(self, source: str, rendered: str, variables: int):
        """Log a successful parse."""
        self.debug(f"Parsed '{source}' -> {rendered} ({variables} free variables)")

    def rule_applied(self, rule: str, before: str, after: str):
        """Log a rewrite rule application."""
        if before == after:
            self.debug(f"    {rule}: no match in {before}")
        else:
            self.debug(f"    {rule}: {before} => {after}")

    def substitution_applied(self, target: str, replacement: str, result: str):
        """Log a substitution."""
        self.debug(f"    replace {target} with {replacement} => {result}")

    def analysis_finished(self, variables: Sequence[str], satisfying: int):
        """Log the end of an exhaustive enumeration."""
        rows = 1 << len(variables)
        scope = ", ".join(variables) if variables else "no variables"
        self.debug(f"Enumerated {rows} assignments over {scope}: {satisfying} satisfying")

    def notation_rejected(self, operator: str, token: str, conflict: str):
        """Log a rejected notation update."""
        self.debug(f"Rejected token '{token}' for {operator}: ambiguous with {conflict}")


class LogicFormatter(logging.Formatter):
    """Custom formatter for engine logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[LogicLogger] = None


def get_logger(name: str = "sentential") -> LogicLogger:
    """Get or create the global engine logger instance.

    Args:
        name: Logger name (default: "sentential")

    Returns:
        LogicLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = LogicLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on caller flags.

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
