"""Common utilities and shared functionality."""

from .exceptions import (
    BinaryNotFoundError,
    CommandError,
    CommandTimeoutError,
    ConfigParseError,
    ConfigurationError,
    RouteBenchError,
    TunnelBusyError,
    TunnelError,
    TunnelStartError,
    TunnelStopError,
)
from .logging import get_logger, setup_logging
from .process import CommandResult, CommandRunner
from .utils import PLACEHOLDER, format_metric, validate_non_empty_string

__all__ = [
    # Command execution
    "CommandRunner",
    "CommandResult",
    # Exceptions
    "RouteBenchError",
    "ConfigurationError",
    "ConfigParseError",
    "CommandError",
    "BinaryNotFoundError",
    "CommandTimeoutError",
    "TunnelError",
    "TunnelStartError",
    "TunnelStopError",
    "TunnelBusyError",
    # Logging
    "get_logger",
    "setup_logging",
    # Utils
    "validate_non_empty_string",
    "format_metric",
    "PLACEHOLDER",
]
