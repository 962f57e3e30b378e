from internal.logging import LogLevel, StructuredLogger, FileLogger, get_logger, parse_level
from core.errors import BaseSimError, InvalidArgumentError, DivisionByZeroError

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "FileLogger",
    "get_logger",
    "parse_level",
    "BaseSimError",
    "InvalidArgumentError",
    "DivisionByZeroError",
]
